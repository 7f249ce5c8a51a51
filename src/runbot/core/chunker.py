"""Output chunking and cropping for size-limited chat messages."""

from __future__ import annotations

from runbot.core.types import FENCE, CropResult, OutputFragment

# ```\n{payload}\n```
FRAGMENT_OVERHEAD = len(FENCE) * 2 + 2
CROP_NOTICE = "(cropped {count} characters)\n"
MAX_CROP_ITERATIONS = 8
SEPARATOR = "/"


def chunk(output: str, limit: int, overhead: int = FRAGMENT_OVERHEAD) -> list[OutputFragment]:
    """Split output into consecutive fenced fragments of at most ``limit`` characters.

    Every payload but the last is exactly ``limit - overhead`` characters long.
    Payloads concatenate back to ``output``.
    """

    size = limit - overhead
    if size <= 0:
        raise ValueError(f"limit {limit} leaves no room for output after {overhead} characters of fencing")
    if len(output) <= size:
        return [OutputFragment(output)]
    return [OutputFragment(output[start : start + size]) for start in range(0, len(output), size)]


def crop_notice(dropped: int) -> str:
    return CROP_NOTICE.format(count=dropped)


def crop_to_fit(
    output: str,
    template_overhead: int,
    limit: int,
    *,
    avoid_separators: bool = True,
) -> CropResult:
    """Crop output so it fits into one message together with a crop notice.

    The notice length depends on the number of digits of the dropped count,
    which in turn depends on where the cut lands. The cut is moved back until
    ``end + template_overhead + len(notice) <= limit`` holds for the final
    dropped count, so the rendered message never exceeds ``limit``.
    """

    total = len(output)
    if total + template_overhead <= limit:
        return CropResult(output, 0)

    budget = limit - template_overhead
    end = budget
    for _ in range(MAX_CROP_ITERATIONS):
        candidate = max(budget - len(crop_notice(total - end)), 0)
        if candidate == end:
            break
        end = candidate

    if avoid_separators:
        end = avoid_separator_cut(output, end)

    # the separator shift can add a digit to the dropped count
    while end > 0 and end + template_overhead + len(crop_notice(total - end)) > limit:
        end -= 1

    return CropResult(output[:end], total - end)


def avoid_separator_cut(text: str, end: int) -> int:
    """Pull a cut point back so it does not land just past a lone path separator."""

    if end >= 3 and text[end - 2] == SEPARATOR and text[end - 3] != SEPARATOR:
        return end - 2
    if end >= 1 and text[end - 1] == SEPARATOR:
        return end - 1
    return end


def render_fragments(fragments: list[OutputFragment]) -> list[str]:
    return [fragment.text for fragment in fragments]
