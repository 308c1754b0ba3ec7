# Colorless Memory

Colorless Memory is a memory card game for two players over the network. Each player picks an icon in the main menu and then joins a lobby. The server seats players in the first lobby that has a free seat. The first player in a lobby is the host. Once the second player arrives, the host picks a deck and starts the game. On each turn a player flips two cards. A matching pair scores a point and the same player goes again. A mismatch passes the turn. The game ends when all pairs are found.

## Installation

```
pip install .
```

The client uses pygame for its window and drawing. Textures and the font load from a `data/` directory, which is looked up under the working directory by default. A missing texture is drawn as nothing. A missing font is replaced by pygame's default font.

## Running

Start the server first:

```
colorless-memory-server [--host ADDRESS] [--port PORT]
```

By default the server listens on all addresses at port 55001. It runs until interrupted.

Then start one client for each player:

```
colorless-memory [--host HOST] [--port PORT] [--data-dir DIR]
```

By default the client connects to `localhost:55001`. The `--data-dir` option names the directory that holds `data/`. The client exits with status 1 if it cannot reach the server or if the connection is lost.

The player name comes from the `USERNAME` environment variable, with its first letter in upper case. When that variable is unset, the name is `Default`. A name is stored in ten bytes, so a longer name is cut short.

To try the game on one machine, this command starts a server and two clients in a single window:

```
colorless-memory-local [--host HOST] [--port PORT] [--data-dir DIR]
```

Press Tab to switch between the two clients. The label in the top left corner shows which client is on screen.

All three commands write their log messages to standard error.

## Playing

- Main menu: **PLAY** joins a lobby, **QUIT** closes the window, and **Icon 1** to **Icon 5** choose your icon.
- Lobby: once both seats are taken, the host can choose a deck and press **START GAME**. **LEAVE** goes back to the menu. If the host leaves, the other player is seated again as the host of a lobby.
- Game: on your turn, left-click two cards. **LEAVE** ends the game for both players, and the other player sees "Other player leave".

## Decks

| Deck  | Cards |
|-------|-------|
| 3x2   | 6     |
| 7x2   | 14    |
| 6x5   | 30    |
| 7x6   | 42    |
| 10x5  | 50    |

`colorless_memory.constants` provides `deck_grid`, `deck_card_count` and `deck_label` for these decks.

## Library use

The game logic does not need a window:

- `colorless_memory.gameserver.Server` runs lobbies and games against any `ServerNetworkInterface`. An implementation provides `pop_packet()`, which returns a `PacketData` or `None`, `send_packet(packet, client_id)`, and `pop_disconnected_client()`, which returns a client id or `None`. Call `Server.update()` to process everything that is pending.
- `colorless_memory.netserver.NetworkServerManager` is the TCP implementation of that interface. It accepts up to 100 clients and can be used as a context manager.
- `colorless_memory.gamemanager.GameManager` keeps a client's view of the player, the lobby and the game. It is updated from server packets through `on_packet_received`.
- `colorless_memory.netclient.NetworkClientManager` is the TCP client connection. Its `pop_packet()` raises `ConnectionError` once the connection is lost and every received packet has been taken.
- `colorless_memory.packets` defines every message. Call `register_my_packets()` once, then use `encode_packet` and `decode_packet`. `decode_packet` raises `colorless_memory.wire.WireError` on bad data. On a socket, each packet is sent with a 4-byte big-endian length in front of it.

## What it does not do

- There is no screen for entering a player name. The name always comes from `USERNAME`.
- A client that loses its connection does not reconnect.
- The server keeps everything in memory. It stores no players, scores or results.

## Tests

```
pip install .[test]
pytest
```