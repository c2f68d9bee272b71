import re
from pathlib import Path
from typing import List, Union

from .exceptions import SampleParseError, UnreadableSamplesError

INT_RE = re.compile(r"^[+-]?\d+$")
SEP_RE = re.compile(r"[,\s]+")


def parse_call_volumes(text: str) -> List[int]:
    """
    Parses per-minute call counts like:
      2, 2, 2, 2
      5 5 5   # peak
      8
    into [2, 2, 2, 2, 5, 5, 5, 8]. Index in the result is the minute offset.
    Range checks are left to the alert counter.
    """
    samples: List[int] = []

    for line_no, line in enumerate(text.splitlines(), start=1):
        line = line.split("#", 1)[0].strip()
        if not line:
            continue

        for tok in SEP_RE.split(line):
            if not tok:
                continue
            if not INT_RE.match(tok):
                raise SampleParseError(line_no, tok)
            samples.append(int(tok))

    return samples


def read_call_volumes(source: Union[bytes, str, Path]) -> List[int]:
    # bytes come from uploads, str/Path from the command line
    try:
        if isinstance(source, bytes):
            text = source.decode("utf-8-sig")
        else:
            text = Path(source).read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise UnreadableSamplesError(
            f"samples are not valid UTF-8 text (byte {e.start})",
            extra={"byte": e.start},
        ) from e
    except OSError as e:
        raise UnreadableSamplesError(
            f"cannot read samples file {str(source)!r}: {e.strerror or e}",
            extra={"path": str(source)},
        ) from e
    return parse_call_volumes(text)
