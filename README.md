# tombkeeper

AES-256-CBC keys and encryption, together with the state objects behind a
keyboard-driven password manager: a menu, a search box, a modal, form fields,
forms, a confirmation dialog, colour themes and a configuration screen.

## Encryption

`tombkeeper.aes` derives keys from a password with PBKDF2-HMAC-SHA256. The
number of derivation cycles for the key, the salt and the IV comes from a
`Config`. Every ciphertext starts with the key's 32-byte HMAC-SHA256 digest, so
a key can tell whether some data, or a file, was encrypted with it.

```python
from tombkeeper.aes import Config, Key

config = Config.from_list([100, 200, 300])
password = "password"
key = Key.from_password(password, config)

ciphertext = key.encrypt(b"Some secret information")
assert key.decrypt(ciphertext) == b"Some secret information"
```

- `Config.builtin(None)` uses the built-in cycle counts (16000 each).
- `Key.generate()` creates a random key instead of deriving one.
- `Key.save(filename)` and `Key.load(filename)` store and read a key as YAML.
- `Key.owns_file(filename)` reads the first 32 bytes of a file and checks them
  against the key's digest.
- Decrypting data that was not encrypted with the key, or that is corrupt,
  raises `AesError`; so does a key whose base64 fields cannot be decoded.

## Configuration

`tombkeeper.config.TombConfig` holds the locations of the key, the secrets file
and the log file, plus a `ColorTheme` for the interface.

```python
from tombkeeper.config import TombConfig

config = TombConfig.load()        # falls back to the built-in settings
print(config.key_filename, config.colors.default)
config.save()                     # writes the default config file
```

`TombConfig.from_file(filename)` and `TombConfig.export(filename)` read and
write a given YAML file; failures raise `ConfigError`.

Default locations:

| What         | Default               | Environment variable |
|--------------|-----------------------|----------------------|
| key          | `~/.tomb.key`         | `TOMB_KEY`           |
| secrets file | `~/.tomb.yaml`        | `TOMB_FILE`          |
| config       | `~/.tomb.config.yaml` | `TOMB_CONFIG`        |
| log          | `~/.tomb.log`         | `TOMB_LOG`           |

`tombkeeper.applog.log_error(message)` appends a line to the log file and never
raises.

## Colours

`tombkeeper.ui.parse_rgb_hex("#ffd400")` returns `(255, 212, 0)`, and
`rgb_to_color` turns a hex string into a `Color`. The functions
`color_default`, `color_light`, `color_blurred`, `color_default_fg`,
`color_default_bg`, `color_error_fg` and `color_error_bg` resolve a theme entry,
which may be a colour name such as `"cyan"` or an RGB hex string, against the
`TombConfig` they are given, or against `TombConfig.load()` when given none.

## Interface state

The interface is built from plain objects that react to a
`tombkeeper.events.KeyEvent` and return a `LoopEvent` (`PROPAGATE`, `REFRESH`,
`PREVENT` or `QUIT`):

- `tombkeeper.menu.Menu` – menu items with keyboard shortcuts and routes
- `tombkeeper.state.StatefulList` – list selection that wraps around
- `tombkeeper.searchbox.SearchBox` – glob pattern entry
- `tombkeeper.modal.Modal` – editable text modal
- `tombkeeper.fields.TextField`, `tombkeeper.fields.RGBColorField` – form fields
- `tombkeeper.form.Form` – a list of fields with tab focus
- `tombkeeper.confirmation.ConfirmationDialog` – yes/no choice
- `tombkeeper.color_config.ColorThemeConfiguration` and
  `tombkeeper.locations_config.TombConfiguration` – configuration panels
- `tombkeeper.config_screen.Configuration` – the configuration screen that
  switches between the panels and saves the theme

Navigation goes through `tombkeeper.events.Context`, which keeps the current
location and its history (`goto`, `goback`); `match_route` matches a path
against a pattern with `:name` segments.

```python
from tombkeeper.events import Context, KeyEvent
from tombkeeper.menu import Menu

menu = Menu.default()
context = Context()
menu.process_keyboard(KeyEvent("Right"), context)
print(menu.current_label(), context.location)   # Help /help
```

## What it does not do

The package has no command to run and draws nothing on a terminal: the objects
above hold state and handle key events, but rendering and the event loop are
left to the caller. It also does not store secrets: there is no secrets file
format, and nothing lists, adds or deletes secrets; only the default location
of such a file is known.