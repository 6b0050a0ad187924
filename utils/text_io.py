# utils/text_io.py
import logging
from pathlib import Path

from algorithms.errors import InvalidAlphabetError, SequenceFileError

logger = logging.getLogger(__name__)

ALPHABET = frozenset("acgt")
LINE_BREAKS = frozenset("\r\n")


def parse_sequence(text: str, name: str = "sequence") -> str:
    """Strip line breaks and reject anything outside a, c, g, t."""
    out = []
    for pos, ch in enumerate(text):
        if ch in LINE_BREAKS:
            continue
        if ch not in ALPHABET:
            raise InvalidAlphabetError(ch, pos, name)
        out.append(ch)
    return "".join(out)


def read_sequence(path) -> str:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SequenceFileError(f"Unable to open {path}: {e}") from e
    seq = parse_sequence(text, name=str(path))
    logger.debug("read %d symbols from %s", len(seq), path)
    return seq


def read_files_as_sequences(files):
    seqs, names = [], []
    if not files:
        return seqs, names
    for f in files:
        name = getattr(f, "name", "uploaded.txt")
        data = f.read()
        try:
            txt = data.decode("utf-8")
        except AttributeError:
            txt = str(data)
        except UnicodeDecodeError as e:
            raise SequenceFileError(f"{name} is not UTF-8 text: {e}") from e
        seqs.append(parse_sequence(txt, name=name))
        names.append(name)
    return seqs, names
