# eventcal/render.py - turn a CalendarGrid into HTML or an inline keyboard
from datetime import MAXYEAR, MINYEAR
from html import escape

from eventcal.utils import shift_month


def render_html(grid) -> str:
    """Markup for the month: header, weekday labels, then one cell per grid slot."""
    html = f"\n\t<h2>{escape(grid.label)}</h2>"
    labels = ''.join(f"\n\t\t<li>{label}</li>" for label in grid.weekday_labels)
    html += f"\n\t<ul class=\"weekdays\">{labels}\n\t</ul>"
    html += "\n\t<ul>"
    for week in grid.weeks():
        for slot in week:
            if slot is None:
                html += "\n\t\t<li class=\"fill\"></li>"
                continue
            html += f"\n\t\t<li>\n\t\t\t<strong>{slot.day_of_month:02d}</strong>"
            for event in slot.events:
                html += f"\n\t\t\t<a href=\"/events/{event.id}\">{escape(event.title)}</a>"
            html += "\n\t\t</li>"
    html += "\n\t</ul>\n"
    return html


def render_event_html(event) -> str:
    return (
        f"\n\t<h2>{escape(event.title)}</h2>"
        f"\n\t<p class=\"dates\">{event.start:%B %d, %Y, %H:%M} &mdash; {event.end:%B %d, %Y, %H:%M}</p>"
        f"\n\t<p>{escape(event.description)}</p>\n"
    )


def _nav_cell(text, grid, delta, prefix, at_edge):
    if at_edge:
        return {'text': ' ', 'callback_data': 'noop'}
    y, m = shift_month(grid.year, grid.month, delta)
    return {'text': text, 'callback_data': f"{prefix}:month:{y}-{m:02d}"}


# returns keyboard as list of lists for InlineKeyboardMarkup

def build_month_keyboard(grid, prefix: str):
    kb = []
    kb.append([{'text': d[:2], 'callback_data': 'noop'} for d in grid.weekday_labels])
    for week in grid.weeks():
        row = []
        for slot in week:
            if slot is None:
                row.append({'text': ' ', 'callback_data': 'noop'})
            else:
                ds = f"{grid.year}-{grid.month:02d}-{slot.day_of_month:02d}"
                text = f"{slot.day_of_month}*" if slot.events else str(slot.day_of_month)
                row.append({'text': text, 'callback_data': f"{prefix}:day:{ds}"})
        kb.append(row)
    # prev / next row, no arrow past the first or last month a date can hold
    kb.append([
        _nav_cell('<', grid, -1, prefix, (grid.year, grid.month) == (MINYEAR, 1)),
        {'text': grid.label, 'callback_data': 'noop'},
        _nav_cell('>', grid, 1, prefix, (grid.year, grid.month) == (MAXYEAR, 12)),
    ])
    return kb


def render_day_text(slot, year: int, month: int) -> str:
    header = f"{year}-{month:02d}-{slot.day_of_month:02d}"
    if not slot.events:
        return f"{header}: no events."
    lines = [f"{header}:"]
    for event in slot.events:
        lines.append(f"{event.start:%H:%M}-{event.end:%H:%M} {event.title} (#{event.id})")
    return '\n'.join(lines)
