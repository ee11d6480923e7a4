# mcviewgen

A small HTTP service that draws Minecraft-style views as PNG images. Its
main feature is the in-game tab list: you post the online players and get
back an image with their heads, coloured names (the `§` formatting codes
are understood) and ping icons, framed by configurable header and footer
lines.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running the server

```
mcviewgen
mcviewgen --port 8080 --index-page viewer.html
```

Options:

- `--port` — port to listen on (default 4399; the server binds `0.0.0.0`);
- `--index-page` — an HTML file served at `/skinview3d`. Without it that
  route answers with an empty page.

On start-up the command:

1. reads `./config/config.yml`, writing a default one first if it is missing;
2. sets up logging to the console and to daily files
   (`./config/logs/YYYY-MM-DD.log`);
3. fetches the list of game releases from the official launcher service and
   the list of versions the chat add-on publishes resources for, and keeps
   those in both;
4. for each configured version (the latest release when none is configured)
   downloads and checks the client jar, extracts its `assets` folder into
   `./config/assets/<version>`, and applies the add-on's resource files,
   recording their hash in the configuration file;
5. loads the configured language file, the font from `./config/fonts`
   (`Minecraft.ttf` by default, downloaded if missing; any other missing
   font is an error) and the skins already cached in `./config/skins`;
6. starts the web server.

Everything the service downloads or generates lives under `./config`, so
run it from the directory you want that folder in.

## HTTP API

| Method | Path                          | Purpose                                     |
|--------|-------------------------------|---------------------------------------------|
| GET    | `/api/v1/ping`                | Health check, answers `{"message": "pong"}` |
| POST   | `/api/v1/get_player_list`     | Render the online player list               |
| GET    | `/skinview3d`                 | The page given with `--index-page`          |
| GET    | `/skinview3d/fonts/<file>`    | Files from `./config/fonts`                 |
| GET    | `/skinview3d/skins/<file>`    | Files from `./config/skins`                 |
| GET    | `/`                           | Redirects (301) to `/api/v1/swagger/index.html` |

### Rendering a player list

Request body:

```json
{
  "version": "1.21.1",
  "entry": [
    {"player-name": "§l§d[OP] §r§6Steve", "player-uuid": "00000000000000000000000000000000", "ping": 50},
    {"player-name": "Alex", "player-uuid": "11111111111111111111111111111111", "ping": 320}
  ],
  "options": {"show-avatar": true}
}
```

`version` is required and must be one of the versions with registered
texture layouts (`1.21` and `1.21.1`). Every entry needs a non-empty
`player-name` and `player-uuid` and a non-zero `ping`. A request with no
players is rejected. Ping values below zero are shown as "unknown";
otherwise the icon drops a bar at 150, 300, 600 and 1000 ms.

Skins are looked up by player name at the official profile service; if
that fails, the skin sites listed in `minecraft.blessing-skin` are tried
with the entry's uuid. A player whose skin or ping icon cannot be loaded
is left out of the image.

A successful response carries the image as a PNG data URL:

```json
{"code": 200, "data": "data:image/png;base64,..."}
```

Errors come back with status 400:

```json
{"code": 400, "message": "no player data found"}
```

## Configuration

`./config/config.yml` holds:

- `log` — `level` (`trace`, `debug`, `info`, `warn`, `error`; anything else
  means `info`), `aging` (how long log files are kept, e.g. `72h`),
  `force-new` and `colorful`;
- `minecraft.version.entry-list` — the game versions to load, each with a
  `name` and the `hash` of the last add-on resource set applied;
- `minecraft.resource` — the `language` and `font` file names;
- `minecraft.blessing-skin` — base addresses of skin sites;
- `api.player-list` — `header-text` and `footer-text` lines drawn above
  and below the players;
- `api.browserless` — `url` and `timeout`, read and saved but not used by
  the service.

## Using it from Python

- `mcviewgen.server.create_app(state, index_page)` builds the Flask
  application without starting it; `serve(state, index_page, port)` runs it.
- `mcviewgen.player_list.get_player_list(state, request)` returns the list
  as a Pillow image, given an `AppState` and a request made by
  `mcviewgen.model.parse_player_list_request(data)`. A font must first be
  loaded with `mcviewgen.draw.load_font(path)`.
- `mcviewgen.component.Component` parses `§`-formatted text into styled
  characters; `mcviewgen.draw.print_char` draws them with shadows.
- `mcviewgen.draw.inventory(name, inv, skin)` places an already rendered
  skin image and a name tag into an inventory background, such as the one
  from `mcviewgen.texture.get_asset_manager(version).get_player_inventory()`.
- `mcviewgen.graph.load_model(path)` reads a block model JSON file.
- `mcviewgen.render.build_target_url(RenderOption(...))` builds the URL of
  the skin viewer page with its query parameters.

## What it does not do

- It does not serve API documentation: the `/` redirect points at a
  Swagger page that the server has no route for.
- It does not render skins in 3D or take screenshots of the viewer page;
  `build_target_url` only builds the address.
- It does not render block models; `load_model` only parses them.
- No endpoint draws the inventory view; `draw.inventory` is a library
  function only.