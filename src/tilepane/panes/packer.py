"""Height-constrained packing of prepared entries into a row budget."""
from typing import Sequence

from ..core.renderable import PackedEntry, PreparedEntry


def pack_entries_to_height(prepared: Sequence[PreparedEntry], content_rows: int) -> list[PackedEntry]:
    """Select the most recent entries that fit in content_rows rows.

    Entries are admitted newest first. Every admitted entry after the first
    costs one extra spacer row. An entry that does not fit is skipped and the
    scan continues with older entries, which may be shorter. When nothing fits
    the most recent entry is accepted alone so the pane is never empty; the
    overflow is left to the renderer to clip.

    Returns:
        The packed entries in chronological order (oldest first)
    """
    used_rows = 0
    packed: list[PackedEntry] = []

    for entry in reversed(prepared):
        spacer = 1 if packed else 0
        needed = entry.lines_needed + spacer
        if used_rows + needed > content_rows:
            continue

        packed.append(PackedEntry.from_prepared(entry, needs_leading_spacer=spacer == 1))
        used_rows += needed

    if not packed and prepared:
        packed.append(PackedEntry.from_prepared(prepared[-1], needs_leading_spacer=False))

    packed.reverse()
    return packed


def rows_used(packed: Sequence[PackedEntry]) -> int:
    """Rows a packed sequence occupies, spacers included."""
    return sum(entry.lines_needed + (1 if entry.needs_leading_spacer else 0) for entry in packed)
