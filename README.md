# rangefetch

rangefetch prints an ASCII banner for your operating system and, beside it,
a short summary of the machine:

- OS (on Linux, the distribution ID from `/etc/os-release`; otherwise the
  lower-case system name, such as `windows` or `darwin`)
- hostname
- CPU model, core count and clock speed
- local IP address (the first non-loopback `192.168.x.x` IPv4 address found)
- public IP address, as reported by a public web service
- memory used and total
- every graphics adapter found
- uptime

CPU, memory, GPU and uptime details are gathered on Linux, macOS and
Windows, partly by running system tools (`lspci`, `free`, `uptime`,
`sysctl`, `vm_stat`, `system_profiler`, `wmic`, `net stats srv`). Where a
tool is missing the line shows `N/A`; on other systems it shows
`Unsupported OS`.

## Installation

```
pip install .
```

Add the `test` extra to get the test dependencies:

```
pip install ".[test]"
```

## Usage

```
rangefetch
```

The command takes no options besides `--help`.

On each run rangefetch looks for its configuration file. If the file is
missing or empty, it asks whether to install manually or automatically
(`M` or `A`, in either case; anything else asks again):

- `A` writes a default configuration and continues.
- `M` writes nothing. Unless you have created the file yourself by then,
  rangefetch reports that it cannot open `config.json` and exits with
  status 1.

If the file cannot be read or is not valid JSON, rangefetch prints the
error to standard error and exits with status 1.

The configuration file lives at:

| System  | Path                                                        |
|---------|-------------------------------------------------------------|
| Linux   | `~/.config/rangefetch/config.json`                          |
| macOS   | `~/Library/Application Support/rangefetch/config.json`      |
| Windows | `%APPDATA%\rangefetch\config.json`                          |
| Android | `~/rangefetch/config.json`                                  |
| other   | `~/.rangefetch_config.json`                                 |

The file is JSON with two sections. An automatic install writes:

```json
{
    "display": {
        "hide_public_ip": false,
        "hide_private_ip": false,
        "hide_gpu0": false,
        "hide_gpu1": false,
        "hide_username": false,
        "hide_hostname": false,
        "hide_kernel": false,
        "hide_uptime": false,
        "hide_resolution": false,
        "hide_shell": false,
        "hide_de": false,
        "hide_wm": false
    },
    "theme": {
        "color_output": "Blue",
        "compact_mode": false,
        "font_style": "Default",
        "use_differentimg": false,
        "image_source": ""
    }
}
```

Missing fields keep their defaults, and key names are also matched
ignoring case. A field of the wrong JSON type is reported as a parse error.

`theme.color_output` sets the banner colour. The recognised names are `red`,
`green`, `yellow`, `blue`, `magenta` and `cyan`, in lower case. Any other
value, including the default `Blue`, prints the banner without colour.

Banners are read from an `assets` directory in the current working
directory, as `<os>.txt`, for example `assets/ubuntu.txt` or
`assets/darwin.txt`. If that file is missing, `assets/default.txt` is used;
if that is missing too, the banner is the line
`[no banner found for <os>]`.

The banner is padded to 35 columns, followed by three spaces and the
details; detail lines longer than 58 bytes are cut short and end in `...`.

## What it does not do

- Only `theme.color_output` has an effect. The `display` switches and the
  other `theme` settings are read and stored, but nothing is hidden and the
  layout, font and image do not change.
- No banners are shipped with the package; supply your own `assets`
  directory.
- Choosing a manual install does not create or edit the file for you.

## Using it as a library

```python
from rangefetch.checker import load_config
from rangefetch.info import system_info

print(system_info(load_config()))
```

`rangefetch.checker.load_config` raises `rangefetch.checker.ConfigError`
when the file cannot be opened or parsed. `rangefetch.paths.config_path`
returns where the file is expected, and `rangefetch.installer.auto_install`
writes the default configuration to a path of your choosing.

The parsers are separate functions, so you can run them on captured output
without the underlying tools installed. For example,
`rangefetch.gpu.parse_lspci`, `rangefetch.memory.parse_free`,
`rangefetch.uptime.parse_net_stats` and `rangefetch.cpu.model_from_cpuinfo`
each take a command's output or a file's contents as text, and
`rangefetch.info.layout` places any banner text beside any list of lines.