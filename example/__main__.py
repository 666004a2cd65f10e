"""
A pretend media-vault CLI that prints clap-style help, for trying out `manualgen`.

    manualgen --stdout python -m example
"""
import sys

HELP = {
    (): """Command line interface client for a media vault

Usage: vault [OPTIONS] <COMMAND>

Commands:
  login   Logs into the vault
  media   Manages media assets
  config  Reads or changes the vault configuration
  help    Print this message or the help of the given subcommand(s)

Options:
  -u, --vault-url <VAULT_URL>  Vault URL. Example: http://localhost:8000
  -h, --help                   Print help
  -V, --version                Print version
""",
    ("login",): """Logs into the vault

Usage: vault login [OPTIONS]

Options:
  -U, --username <USERNAME>  Vault username
  -h, --help                 Print help
""",
    ("media",): """Manages media assets

Usage: vault media <COMMAND>

Commands:
  get     Gets the metadata of a media asset
  upload  Uploads a file  (images, video or audio)
  help    Print this message or the help of the given subcommand(s)

Options:
  -h, --help  Print help
""",
    ("media", "get"): """Gets the metadata of a media asset

Usage: vault media get <MEDIA>

Arguments:
  <MEDIA>  Media asset ID

Options:
  -h, --help  Print help
""",
    ("media", "upload"): """Uploads a file  (images, video or audio)

Usage: vault media upload [OPTIONS] <PATH>

Arguments:
  <PATH>  Path to the file to upload

Options:
  -t, --title <TITLE>  Title for the media asset
  -h, --help           Print help
""",
    ("config",): """Reads or changes the vault configuration

Usage: vault config [OPTIONS]

Options:
  -h, --help  Print help
""",
}


def main():
    """Main entry point for the pretend CLI."""
    args = sys.argv[1:]
    if not args or args[-1] not in ("-h", "--help"):
        print("error: only --help is implemented", file=sys.stderr)
        sys.exit(2)

    path = tuple(args[:-1])
    if path not in HELP:
        print(f"error: unrecognized subcommand '{' '.join(path)}'", file=sys.stderr)
        sys.exit(2)

    sys.stdout.write(HELP[path])


if __name__ == "__main__":
    main()
