"""
Renderers that project ledger records and summaries onto host page markup.

Every renderer takes a parsed page (``BeautifulSoup``) and edits it in place.
A renderer whose anchor is missing from the page does nothing.
"""
import logging
from typing import Protocol, Sequence

from bs4 import BeautifulSoup, Tag

from runclub.aggregation import Summary
from runclub.config import NO_PLEDGE
from runclub.ledger import Run, format_amount, format_km, format_number, wealth_for

logger = logging.getLogger(__name__)

HISTORY_BODY = ".data-table tbody"
STAT_VALUES = ".stat-value"
ACTIVITY_FEED = ".activity-feed"
WELCOME = "#user-welcome"
TRACKER_FEEDBACK = "#tracker-feedback"

HISTORY_COLUMNS = 5
EMPTY_HISTORY_TEXT = "No runs logged yet. Start running!"
EMPTY_FEED_TEXT = "No recent activity."
FEED_SIZE = 3
LEADERBOARD_USER_ROW = 2

MONEY_STYLE = "color: #00a36c; font-weight: bold;"
YOU_STYLE = "font-weight: bold; color: #00a36c;"


class Totals(Protocol):
    total_distance: float
    total_wealth: float


def parse_page(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def _anchor(doc: BeautifulSoup, selector: str) -> Tag | None:
    node = doc.select_one(selector)
    if node is None:
        logger.debug("Anchor %s not found, skipping render.", selector)
    return node


def _cell(doc: BeautifulSoup, text: str = "", style: str | None = None) -> Tag:
    td = doc.new_tag("td")
    if style:
        td["style"] = style
    td.string = text
    return td


def _history_row(doc: BeautifulSoup, distance: float, pledge: str, date_text: str) -> Tag:
    tr = doc.new_tag("tr")
    tr.append(_cell(doc, date_text))
    tr.append(_cell(doc, f"{format_number(distance)} km"))
    tr.append(_cell(doc, "-"))
    if pledge != NO_PLEDGE:
        pledge_cell = _cell(doc)
        badge = doc.new_tag("span", attrs={"class": "ethics-badge"})
        badge.string = pledge.upper()
        pledge_cell.append(badge)
        wealth_text = f"+${wealth_for(distance)}"
    else:
        pledge_cell = _cell(doc, "-")
        wealth_text = "$0.00"
    tr.append(pledge_cell)
    tr.append(_cell(doc, wealth_text, MONEY_STYLE))
    return tr


def _empty_history_row(doc: BeautifulSoup) -> Tag:
    tr = doc.new_tag("tr", attrs={"class": "empty-row"})
    td = _cell(doc, EMPTY_HISTORY_TEXT, "text-align:center; color:#999; padding: 20px;")
    td["colspan"] = str(HISTORY_COLUMNS)
    tr.append(td)
    return tr


def render_history_table(doc: BeautifulSoup, runs: Sequence[Run]) -> None:
    body = _anchor(doc, HISTORY_BODY)
    if body is None:
        return
    body.clear()
    if not runs:
        body.append(_empty_history_row(doc))
        return
    for run in runs:
        body.append(_history_row(doc, run.distance, run.pledge, run.date))


def append_row(doc: BeautifulSoup, distance: float, pledge: str, date_text: str) -> None:
    """Put a single run at the top of the history table without rebuilding it."""
    body = _anchor(doc, HISTORY_BODY)
    if body is None:
        return
    if EMPTY_HISTORY_TEXT in body.get_text():
        body.clear()
    body.insert(0, _history_row(doc, distance, pledge, date_text))


def _feed_item(doc: BeautifulSoup, run: Run) -> Tag:
    li = doc.new_tag("li", attrs={"class": "activity-item"})
    left = doc.new_tag("div", attrs={"class": "activity-left"})
    title = doc.new_tag("span", attrs={"class": "activity-title"})
    title.string = f"Run Logged ({format_number(run.distance)}km)"
    when = doc.new_tag("span", attrs={"class": "activity-date"})
    when.string = run.date
    left.append(title)
    left.append(when)
    amount = doc.new_tag("span", attrs={"class": "activity-amount"})
    amount.string = f"+${run.wealth} {run.pledge}" if run.pledged else "No Pledge"
    li.append(left)
    li.append(amount)
    return li


def render_dashboard(doc: BeautifulSoup, summary: Summary, runs: Sequence[Run]) -> None:
    stats = doc.select(STAT_VALUES)
    if len(stats) >= 3:
        stats[0].string = f"${format_amount(summary.total_wealth)}"
        stats[1].string = format_km(summary.total_distance)
        stats[2].string = summary.active_pledge
    else:
        logger.debug("Dashboard needs 3 stat slots, found %d.", len(stats))

    feed = _anchor(doc, ACTIVITY_FEED)
    if feed is None:
        return
    feed.clear()
    if not runs:
        li = doc.new_tag(
            "li", attrs={"class": "activity-item", "style": "justify-content:center; color:#999;"}
        )
        li.string = EMPTY_FEED_TEXT
        feed.append(li)
        return
    for run in runs[:FEED_SIZE]:
        feed.append(_feed_item(doc, run))


def render_leaderboard_row(doc: BeautifulSoup, user_name: str | None, figures: Totals | None) -> None:
    """Fill the row reserved for the current user on the leaderboard.

    ``figures`` is ``None`` when the user has no runs yet; in that case, or
    without a stored name, the placeholder row is left untouched.
    """
    if not user_name or figures is None:
        return
    body = _anchor(doc, HISTORY_BODY)
    if body is None:
        return
    rows = body.find_all("tr", recursive=False)
    if len(rows) <= LEADERBOARD_USER_ROW:
        return
    cells = rows[LEADERBOARD_USER_ROW].find_all("td", recursive=False)
    if len(cells) < 5:
        return
    cells[1].string = f"{user_name} (You)"
    cells[1]["style"] = YOU_STYLE
    cells[2].string = format_km(figures.total_distance)
    cells[4].string = f"${format_amount(figures.total_wealth)}"


def render_welcome(doc: BeautifulSoup, user_name: str | None) -> None:
    for node in doc.select(WELCOME):
        if user_name:
            node.string = f"Welcome, {user_name}"
            node["style"] = "display: inline;"
        else:
            node["style"] = "display: none;"


def render_tracker_feedback(doc: BeautifulSoup, distance: float, pledge: str) -> None:
    box = _anchor(doc, TRACKER_FEEDBACK)
    if box is None:
        return
    box.clear()
    km = format_number(distance)
    if pledge == NO_PLEDGE:
        message = doc.new_tag("div", attrs={"class": "warning-message"})
        heading = doc.new_tag("h3")
        heading.string = f"Run Logged: {km}km"
        tip = doc.new_tag("p")
        tip.string = "Tip: Next time, select a pledge to turn your run into community support!"
        message.append(heading)
        message.append(tip)
    else:
        message = doc.new_tag("div", attrs={"class": "success-message"})
        heading = doc.new_tag("h3")
        heading.string = "Wealth Shared!"
        message.append(heading)
        message.append(_paragraph(doc, "Great job! You ran ", f"{km}km", "."))
        raised = _paragraph(doc, "You raised ", f"${wealth_for(distance)}", " for ")
        charity = doc.new_tag("strong")
        charity.string = pledge
        raised.append(charity)
        raised.append(".")
        message.append(raised)
    box.append(message)


def _paragraph(doc: BeautifulSoup, before: str, strong: str, after: str) -> Tag:
    p = doc.new_tag("p")
    p.append(before)
    bold = doc.new_tag("strong")
    bold.string = strong
    p.append(bold)
    p.append(after)
    return p
