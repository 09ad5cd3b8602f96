from pathlib import Path

from cooknote.utilities.config import DATA_DIR
from cooknote.utilities.constants import RECIPES_KEY, FAMILY_KEY

# Store keys and the files that back them in a data directory
KEY_FILES = {
    RECIPES_KEY: 'recipes.json',
    FAMILY_KEY: 'family.json',
}


def file_for_key(data_dir: Path, key: str) -> Path:
    name = KEY_FILES.get(key) or (key.lstrip('@') + '.json')
    return Path(data_dir) / name


__all__ = ['DATA_DIR', 'KEY_FILES', 'file_for_key']
