import os

RULES_FILENAME = "rules.txt"

RULES_DEFAULT = (
    "§6§lServer Rules§r\n"
    "§8» §7Be respectful to everyone\n"
    "§8» §7No cheating or exploiting bugs\n"
    "§8» §7No spamming or advertising\n"
    "§8» §7Listen to §cstaff §7at all times\n"
    "§8» §7Have fun and use common sense §c❤\n"
)

RULES_UNREADABLE = "§cRules file could not be read."

def prepare_data_folder(data_folder) -> str:
    """Make sure the data folder and a rules file exist, returning the rules path.

    Creation is best-effort: failures are printed and ignored since the /rules
    command copes with a missing file on its own. An existing rules file is
    never touched.
    """
    data_folder = os.fspath(data_folder)
    rules_path = os.path.join(data_folder, RULES_FILENAME)

    try:
        os.makedirs(data_folder, exist_ok=True)
    except OSError as e:
        print(f"[Rulez] Failed to create data folder {data_folder}: {e}")
        return rules_path

    if not os.path.exists(rules_path):
        try:
            open_text_file(rules_path, mode="x", text=RULES_DEFAULT)
        except FileExistsError:
            pass  # created by someone else in the meantime, keep theirs
        except OSError as e:
            print(f"[Rulez] Failed to write default {RULES_FILENAME}: {e}")

    return rules_path

def read_rules(path: str) -> str | None:
    """Read the rules file as-is. Returns None if it can't be read for any reason."""
    try:
        return open_text_file(path, mode="r")
    except (OSError, UnicodeDecodeError):
        return None

def open_text_file(path: str, mode: str = "r", text: str = None) -> str:
    """
    UTF-8 text file handler.
    - For reading: mode="r", returns file content as str.
    - For writing: mode="w" or "x", text=<string to write>
    Line endings are kept exactly as stored.
    """
    if "r" in mode:
        with open(path, mode, encoding="utf-8", newline="") as f:
            return f.read()

    elif ("w" in mode or "x" in mode) and text is not None:
        with open(path, mode, encoding="utf-8", newline="") as f:
            f.write(text)
            return text

    else:
        raise ValueError("Invalid mode or missing text for writing.")
