"""CLI entry point: print body positions and sunlit regions for one instant.

    uv run solarscope --when "1969-07-20 20:17"
    uv run python -m solarscope.snapshot --body saturn --lang ko
"""

import argparse
import logging
import os
import sys
from datetime import datetime

from dotenv import load_dotenv

load_dotenv()

from pytz import utc  # noqa: E402

from solarscope.catalog import get_body_by_id  # noqa: E402
from solarscope.compute import (  # noqa: E402
    DateParseError,
    compute_snapshot,
    distance_from_earth,
    parse_when,
)
from solarscope.formatting import (  # noqa: E402
    format_coordinate,
    format_distance,
    format_orbital_period,
    format_rotation_period,
    format_scientific,
    format_temperature,
)
from solarscope.i18n import t  # noqa: E402
from solarscope.models import SystemSnapshot  # noqa: E402

log = logging.getLogger("solarscope")

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="solarscope",
        description="Solar System positions and day/night regions for a UTC instant.",
    )
    parser.add_argument(
        "--when",
        default=None,
        help='UTC instant, "YYYY-MM-DD HH:MM" or "YYYY-MM-DD" (default: now). Negative years allowed.',
    )
    parser.add_argument(
        "--realistic",
        action="store_true",
        default=_env_flag("SOLARSCOPE_REALISTIC_SCALE"),
        help="Use true relative body sizes",
    )
    parser.add_argument("--no-moons", action="store_true", help="Skip satellites")
    parser.add_argument("--no-dwarfs", action="store_true", help="Skip dwarf planets")
    parser.add_argument(
        "--lang",
        choices=("en", "ko"),
        default=os.environ.get("SOLARSCOPE_LANG", "en"),
        help="Label language",
    )
    parser.add_argument("--body", default=None, help="Print details for one body id")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _print_table(snapshot: SystemSnapshot, lang: str) -> None:
    print(
        f"{t('header_body', lang):<10} {t('header_type', lang):<13} "
        f"{t('header_position', lang):>30} {t('header_size', lang):>8} "
        f"{t('header_from_sun', lang):>12} {t('header_longitude', lang):>9}"
    )
    for entry in snapshot.bodies:
        x, y, z = entry.position
        print(
            f"{entry.body.name:<10} {t('type_' + entry.body.type, lang):<13} "
            f"{x:>9.3f} {y:>9.3f} {z:>9.3f}  {entry.visual_size:>8.4f} "
            f"{format_distance(entry.distance_from_sun_au):>12} "
            f"{entry.ecliptic_longitude_deg:>8.1f}°"
        )


def _print_sunlit(snapshot: SystemSnapshot, lang: str) -> None:
    sub = snapshot.subsolar
    print(
        f"\n{t('subsolar_label', lang)}: "
        f"{format_coordinate(sub.latitude, 'lat', lang)}, "
        f"{format_coordinate(sub.longitude, 'lon', lang)}"
    )
    for key, names in (
        ("band_daylight", snapshot.sunlit.daylight),
        ("band_twilight", snapshot.sunlit.twilight),
        ("band_night", snapshot.sunlit.night),
    ):
        print(f"  {t(key, lang)}: {', '.join(names) or '-'}")


def _print_body(snapshot: SystemSnapshot, body_id: str, lang: str) -> None:
    entry = snapshot.get(body_id)
    body = entry.body if entry is not None else get_body_by_id(body_id)
    if body is None:
        print(t("error_body", lang).format(body=body_id), file=sys.stderr)
        return
    print(f"\n{body.name} ({t('type_' + body.type, lang)})")
    print(f"  {body.description}")
    from_earth = distance_from_earth(snapshot, body_id)
    if from_earth is not None and body_id != "earth":
        print(f"  {t('detail_from_earth', lang)}: {format_distance(from_earth)}")
    print(f"  {t('detail_mass', lang)}: {format_scientific(body.mass)} kg")
    print(f"  {t('detail_temperature', lang)}: {format_temperature(body.temperature)}")
    if body.orbital_period != 0:
        print(
            f"  {t('detail_orbital_period', lang)}: "
            f"{format_orbital_period(body.orbital_period, lang)}"
        )
    print(
        f"  {t('detail_rotation', lang)}: "
        f"{format_rotation_period(body.rotation_period, lang)}"
    )
    print(f"  {t('detail_axial_tilt', lang)}: {body.axial_tilt:.1f}°")
    for fact in body.facts:
        print(f"  - {fact}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s  %(levelname)-7s  %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        when = parse_when(args.when) if args.when else datetime.now(utc)
    except DateParseError as e:
        print(t("error_date", args.lang).format(error=e), file=sys.stderr)
        return 2

    snapshot = compute_snapshot(
        when,
        use_realistic_scale=args.realistic,
        include_moons=not args.no_moons,
        include_dwarf_planets=not args.no_dwarfs,
    )
    log.info("Computed %d bodies", len(snapshot.bodies))

    _print_table(snapshot, args.lang)
    _print_sunlit(snapshot, args.lang)
    if args.body:
        _print_body(snapshot, args.body, args.lang)
    return 0


if __name__ == "__main__":
    sys.exit(main())
