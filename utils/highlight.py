import html


def highlight_matches_html(text: str, spans: list[tuple[int, int]]):
    """Wrap each (start, len) span of `text` in <mark>; overlaps are clipped."""
    if not text:
        return "<em>No text</em>"
    out = []
    pos = 0
    for s, l in sorted(spans):
        e = min(len(text), s + l)
        s = max(s, pos)
        if e <= s:
            continue
        out.append(html.escape(text[pos:s]))
        out.append("<mark>" + html.escape(text[s:e]) + "</mark>")
        pos = e
    out.append(html.escape(text[pos:]))
    return "<div style='white-space:pre-wrap;font-family:monospace'>" + "".join(out) + "</div>"
