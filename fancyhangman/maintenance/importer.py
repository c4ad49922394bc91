import logging
import tempfile
import time
import uuid
from enum import Enum
from pathlib import Path
from typing import Callable
from pydantic import BaseModel
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn
from fancyhangman.errors import IOFailure, StorageUnavailable
from fancyhangman.lang.normalize import AppLanguage, replace_unicode
from fancyhangman.words.base import WordBase, is_storable

logger = logging.getLogger(__name__)

class DedupMode(str, Enum):
    ADJACENT = "adjacent"  # Compare with the previous kept word, needs sorted input
    GLOBAL = "global"      # Remember every kept word

class StagingResult(BaseModel):
    path: Path
    count: int

class ImportReport(BaseModel):
    inserted: int
    staged: int
    staging_path: Path
    duration_seconds: float

def polish(
    source_path: str | Path,
    language: AppLanguage,
    word_length: int = 5,
    dedup: DedupMode = DedupMode.ADJACENT,
    staging_dir: str | Path | None = None
) -> StagingResult:
    """
    Reads a raw word list, normalizes every line for the given language and writes
    the words of the requested length to a fresh staging file. Words that still
    hold anything but a-z after normalization are dropped.

    With DedupMode.ADJACENT only consecutive duplicates are dropped, so the source
    must be sorted. The staging file is left in place if an error aborts the run.
    """
    staging_path = Path(staging_dir or tempfile.gettempdir()) / f"{uuid.uuid4()}.txt"

    try:
        source = open(source_path, "r", encoding="utf-8")
    except OSError as e:
        raise StorageUnavailable(f"Cannot open source list {source_path}: {e}") from e

    with source:
        try:
            out = open(staging_path, "x", encoding="utf-8")
        except OSError as e:
            raise StorageUnavailable(f"Cannot create staging file {staging_path}: {e}") from e

        previous = None
        seen = set()
        count = 0
        try:
            with out:
                for line in source:
                    word = replace_unicode(line.strip().lower(), language)
                    if len(word) != word_length or not is_storable(word):
                        continue
                    if dedup == DedupMode.GLOBAL:
                        if word in seen:
                            continue
                        seen.add(word)
                    elif word == previous:
                        continue

                    out.write(f"{word}\n")
                    previous = word
                    count += 1
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Polishing {source_path} aborted after {count} words: {e}")
            raise IOFailure(f"Error while polishing {source_path}: {e}") from e

    logger.info(f"Polished {source_path}: {count} words staged in {staging_path}")
    return StagingResult(path=staging_path, count=count)

def insert_staged(
    staging_path: str | Path,
    word_base: WordBase,
    advance: Callable[[], None] | None = None
) -> int:
    """
    Inserts every word of a staging file into the word base.
    Returns the number of words that were actually new.
    """
    try:
        staged = open(staging_path, "r", encoding="utf-8")
    except OSError as e:
        raise StorageUnavailable(f"Cannot open staging file {staging_path}: {e}") from e

    counter = 0
    with staged:
        try:
            for line in staged:
                word = line.strip()
                if not word:
                    continue
                if word_base.insert(word):
                    counter += 1
                if advance:
                    advance()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Import of {staging_path} aborted after {counter} words: {e}")
            raise IOFailure(f"Error while reading {staging_path}: {e}") from e

    logger.info(f"Imported {counter} new words from {staging_path}")
    return counter

def import_words(
    source_path: str | Path,
    language: AppLanguage,
    word_base: WordBase,
    word_length: int = 5,
    dedup: DedupMode = DedupMode.ADJACENT,
    staging_dir: str | Path | None = None,
    progress: bool = False
) -> ImportReport:
    """
    Polishes the source list and imports the result into the word base.
    """
    start_time = time.time()

    if not progress:
        staging = polish(source_path, language, word_length, dedup, staging_dir)
        inserted = insert_staged(staging.path, word_base)
    else:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
        ) as bar:
            polishing = bar.add_task(f"[1/2] Polishing {source_path}...", total=None)
            staging = polish(source_path, language, word_length, dedup, staging_dir)
            bar.update(polishing, total=staging.count, completed=staging.count)

            importing = bar.add_task("[2/2] Importing...", total=staging.count)
            inserted = insert_staged(
                staging.path, word_base, advance=lambda: bar.advance(importing)
            )

    return ImportReport(
        inserted=inserted,
        staged=staging.count,
        staging_path=staging.path,
        duration_seconds=time.time() - start_time
    )
