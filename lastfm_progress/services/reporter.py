"""
Compares the scraped API methods to the implemented ones and renders the Markdown progress report
"""
import logging
import math
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from lastfm_progress.config import settings
from lastfm_progress.exceptions import EmptyCatalogError
from lastfm_progress.schemas import CategoryReport, MethodCatalog, ProgressReport

logger = logging.getLogger(__name__)

PROGRESS_REPORT_INTRO = """# Api Progress ![Progress]({progress_bar})

These are all the Last.fm API methods currently available. 

- Methods implemented by the [Inflatable Last.fm .NET SDK](https://github.com/inflatablefriends/lastfm) link to the relevant documentation page.
- Methods ~~marked with strikethrough~~ aren't currently implemented. Pull requests are welcome!
- Methods _marked with an asterisk *_ aren't listed on [the Last.fm documentation](http://www.last.fm/api), so they might not work!

This list is generated by the [ProgressReport](src/IF.Lastfm.ProgressReport) tool in the solution. Last updated on {updated}
"""

# Invariant culture names, so the timestamp doesn't depend on the process locale
_DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def format_timestamp(moment: datetime) -> str:
    """Long date/time, e.g. "Monday, 19 October 2026 14:05" """
    return "{day}, {date:02d} {month} {year:04d} {hour:02d}:{minute:02d}".format(
        day=_DAY_NAMES[moment.weekday()],
        date=moment.day,
        month=_MONTH_NAMES[moment.month - 1],
        year=moment.year,
        hour=moment.hour,
        minute=moment.minute,
    )


def _distinct(values: Iterable[str]) -> List[str]:
    """Order preserving, case-insensitive de-duplication"""
    seen = set()
    result = []
    for value in values:
        key = value.lower()
        if key not in seen:
            seen.add(key)
            result.append(value)
    return result


def percentage(catalog: MethodCatalog, implemented: Sequence[str]) -> float:
    """Share of all documented methods that are implemented, 0-100

    Extras count towards the total, so this can exceed 100 when the SDK
    implements undocumented methods.

    Raises:
        EmptyCatalogError: If the catalog has no methods at all
    """
    documented = sum(len(methods) for methods in catalog.values())
    if documented == 0:
        raise EmptyCatalogError()
    return 100.0 * len(_distinct(implemented)) / documented


def categorize(category: str, methods: Sequence[str], implemented: Sequence[str]) -> CategoryReport:
    """Split one category's methods into matched, missing and extra"""
    prefix = category.lower()
    candidates = _distinct(m for m in implemented if m.lower().startswith(prefix))
    candidate_keys = {m.lower() for m in candidates}
    documented_keys = {m.lower() for m in methods}

    documented = _distinct(methods)
    return CategoryReport(
        name=category,
        matched=[m for m in documented if m.lower() in candidate_keys],
        missing=[m for m in documented if m.lower() not in candidate_keys],
        extra=[m for m in candidates if m.lower() not in documented_keys],
    )


def categorize_all(catalog: MethodCatalog, implemented: Sequence[str]) -> List[CategoryReport]:
    """Category reports sorted by name (ordinal), not in page order"""
    return [categorize(name, catalog[name], implemented) for name in sorted(catalog)]


def _method_link(method: str) -> str:
    return "[{0}]({1})".format(method, settings.API_METHOD_URL.format(method=method))


def render_category(category: CategoryReport) -> str:
    lines = [f"## {category.name}", ""]
    for method in category.matched:
        lines.append(f"- {_method_link(method)}")
    for method in category.missing:
        lines.append(f"- ~~{_method_link(method)}~~")
    for method in category.extra:
        lines.append(f"- _{method}_ *")
    return "\n".join(lines) + "\n\n"


def render_intro(percent: float, now: datetime) -> str:
    progress_bar = settings.PROGRESS_BAR_URL.format(percent=math.floor(percent))
    return PROGRESS_REPORT_INTRO.format(progress_bar=progress_bar, updated=format_timestamp(now))


def generate_report(
    catalog: MethodCatalog,
    implemented: Sequence[str],
    now: Optional[datetime] = None,
) -> ProgressReport:
    """Compute the per-category breakdown and render it as Markdown"""
    if now is None:
        now = datetime.now(timezone.utc)
    else:
        now = now.astimezone(timezone.utc) if now.tzinfo else now

    percent = percentage(catalog, implemented)
    categories = categorize_all(catalog, implemented)
    for c in categories:
        logger.debug(f"{c.name}: {len(c.matched)}/{c.documented_count} implemented, {len(c.extra)} undocumented")

    markdown = render_intro(percent, now) + "".join(render_category(c) for c in categories)

    logger.info(f"API progress: {percent:.1f}% across {len(categories)} categories")
    return ProgressReport(
        percentage=percent,
        generated_at=now,
        categories=categories,
        markdown=markdown,
    )


def build_report(
    catalog: MethodCatalog,
    implemented: Sequence[str],
    now: Optional[datetime] = None,
) -> str:
    """Markdown progress report for the catalog and implemented methods"""
    return generate_report(catalog, implemented, now).markdown


def write_report(path: Union[str, Path], content: str) -> None:
    """Create or overwrite the report file at path

    Raises:
        OSError: If the file can't be written
    """
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(content)
    logger.info(f"Wrote progress report to {path}")
