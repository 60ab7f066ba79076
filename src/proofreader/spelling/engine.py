"""Dictionary engine: a union of spelling dictionaries."""

import logging
from pathlib import Path
from typing import Optional, Union

from ..errors import DictionaryLoadError
from .dictionary import Dictionary
from .suggest import unique

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

BUNDLED_DICTIONARY_DIR = Path(__file__).resolve().parent.parent / "dictionaries"

SYSTEM_DICTIONARY_DIRS = [
    Path("/usr/share/hunspell"),
    Path("/usr/share/myspell"),
    Path("/usr/share/myspell/dicts"),
    Path("/usr/local/share/hunspell"),
    Path("/Library/Spelling"),
]


class DictionaryLocator:
    """
    Finds built-in Hunspell dictionaries by name (e.g. ``en_US``).

    Directories are searched in order: explicitly configured search
    paths, the usual system Hunspell locations, then the dictionaries
    bundled with the package. The bundled en_US holds a reduced common
    vocabulary, so a system dictionary is preferred when one is
    installed.
    """

    def __init__(
        self,
        search_paths: Optional[list[PathLike]] = None,
        include_bundled: bool = True,
        include_system: bool = True,
    ) -> None:
        dirs = [Path(p) for p in search_paths or []]
        if include_system:
            dirs.extend(SYSTEM_DICTIONARY_DIRS)
        if include_bundled:
            dirs.append(BUNDLED_DICTIONARY_DIR)
        self.search_paths = dirs

    def resolve(self, name: str) -> tuple[Path, Path]:
        """
        Return the (.dic, .aff) paths for a dictionary name.

        Raises:
            DictionaryLoadError: If no directory holds both files
        """
        for directory in self.search_paths:
            dic_path = directory / f"{name}.dic"
            aff_path = directory / f"{name}.aff"
            if dic_path.is_file() and aff_path.is_file():
                if directory == BUNDLED_DICTIONARY_DIR:
                    logger.warning(
                        f"Using the bundled {name} dictionary, which covers common words only; "
                        f"install a Hunspell {name} dictionary or set search_paths for full coverage"
                    )
                return dic_path, aff_path

        searched = ", ".join(str(d) for d in self.search_paths)
        raise DictionaryLoadError(
            f"Dictionary '{name}' not found (searched: {searched})",
            source=name,
        )


class DictionaryEngine:
    """
    Checks words against every registered dictionary.

    A word is valid if ANY dictionary accepts it. Suggestions from all
    dictionaries are ranked together.

    Example:
        engine = DictionaryEngine()
        engine.add_dictionary("en_US.dic", "en_US.aff")
        engine.add_dictionary("project-words.txt")

        engine.check("Kubernetes")  # True if listed in project-words.txt
        engine.suggest("teh")       # ['the', 'eh', ...]
    """

    def __init__(self, max_suggestions: int = 5) -> None:
        """
        Initialize the engine.

        Args:
            max_suggestions: Upper bound on suggestions returned per word
        """
        self.max_suggestions = max_suggestions
        self._dictionaries: list[Dictionary] = []

    @property
    def dictionaries(self) -> list[Dictionary]:
        return list(self._dictionaries)

    def __len__(self) -> int:
        return len(self._dictionaries)

    @property
    def wordchars(self) -> str:
        """Union of the WORDCHARS of every registered dictionary."""
        return "".join(unique(c for d in self._dictionaries for c in d.wordchars))

    def add_dictionary(
        self,
        wordlist_source: PathLike,
        affix_source: Optional[PathLike] = None,
        name: Optional[str] = None,
    ) -> Dictionary:
        """
        Load and register a dictionary.

        Args:
            wordlist_source: Path to a .dic file or a flat word list
            affix_source: Path to the matching .aff file; omit for flat word lists
            name: Display name (defaults to the file stem)

        Returns:
            The loaded dictionary

        Raises:
            DictionaryLoadError: If the dictionary cannot be read or parsed
        """
        dictionary = Dictionary.from_files(wordlist_source, affix_source, name=name)
        self.register(dictionary)
        logger.info(
            f"Loaded dictionary {dictionary.name} ({len(dictionary)} word forms) from {wordlist_source}"
        )
        return dictionary

    def register(self, dictionary: Dictionary) -> None:
        """Register an already-built dictionary."""
        self._dictionaries.append(dictionary)

    def check(self, word: str) -> bool:
        """True if any registered dictionary accepts ``word``."""
        return any(d.check(word) for d in self._dictionaries)

    def suggest(self, word: str) -> list[str]:
        """Ranked corrections merged across dictionaries, at most ``max_suggestions``."""
        if self.max_suggestions <= 0:
            return []

        ranked = []
        for order, dictionary in enumerate(self._dictionaries):
            for key, candidate in dictionary.ranked_suggestions(word):
                ranked.append((key, order, candidate))
        ranked.sort()
        return unique(candidate for _, _, candidate in ranked)[: self.max_suggestions]
