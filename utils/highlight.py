import html


def covered_mask(length: int, positions, width: int):
    """Mark every symbol that belongs to at least one match of `width` symbols."""
    marks = [0] * (length + 1)
    for s in positions:
        if 0 <= s < length and width > 0:
            marks[s] += 1
            marks[min(length, s + width)] -= 1
    mask, active = [], 0
    for i in range(length):
        active += marks[i]
        mask.append(active > 0)
    return mask


def highlight_matches_html(seq: str, positions, width: int, line: int = 60):
    if not seq:
        return "<em>Empty sequence</em>"
    mask = covered_mask(len(seq), positions, width)
    lines = []
    for start in range(0, len(seq), line):
        out, run_start = [], start
        end = min(len(seq), start + line)
        for i in range(start + 1, end + 1):
            if i == end or mask[i] != mask[run_start]:
                seg = html.escape(seq[run_start:i])
                out.append(f"<mark>{seg}</mark>" if mask[run_start] else seg)
                run_start = i
        lines.append(f"{start + 1:>8} " + "".join(out))
    return "<pre style='font-family:monospace'>" + "\n".join(lines) + "</pre>"
