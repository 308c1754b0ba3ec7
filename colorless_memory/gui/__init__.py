"""Widgets (text, button, base screen) and the menu, lobby and game screens of the client."""