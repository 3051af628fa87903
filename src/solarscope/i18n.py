"""Simple two-language (ko/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "band_daylight": {
        "ko": "낮",
        "en": "Daylight",
    },
    "band_twilight": {
        "ko": "박명",
        "en": "Twilight",
    },
    "band_night": {
        "ko": "밤",
        "en": "Night",
    },
    "subsolar_label": {
        "ko": "태양이 바로 위에 있는 곳",
        "en": "Sun directly overhead at",
    },
    "compass_N": {
        "ko": "N",
        "en": "N",
    },
    "compass_S": {
        "ko": "S",
        "en": "S",
    },
    "compass_E": {
        "ko": "E",
        "en": "E",
    },
    "compass_W": {
        "ko": "W",
        "en": "W",
    },
    "type_star": {
        "ko": "항성",
        "en": "star",
    },
    "type_planet": {
        "ko": "행성",
        "en": "planet",
    },
    "type_dwarf-planet": {
        "ko": "왜행성",
        "en": "dwarf planet",
    },
    "type_moon": {
        "ko": "위성",
        "en": "moon",
    },
    "unit_days": {
        "ko": "일",
        "en": "days",
    },
    "unit_years": {
        "ko": "년",
        "en": "years",
    },
    "unit_hours": {
        "ko": "시간",
        "en": "hours",
    },
    "unit_earth_days": {
        "ko": "지구일",
        "en": "Earth days",
    },
    "header_body": {
        "ko": "천체",
        "en": "Body",
    },
    "header_type": {
        "ko": "종류",
        "en": "Type",
    },
    "header_position": {
        "ko": "위치 (x, y, z)",
        "en": "Position (x, y, z)",
    },
    "header_size": {
        "ko": "크기",
        "en": "Size",
    },
    "header_from_sun": {
        "ko": "태양 거리",
        "en": "From Sun",
    },
    "header_longitude": {
        "ko": "황경",
        "en": "Ecl. lon",
    },
    "detail_from_earth": {
        "ko": "지구로부터 거리",
        "en": "Distance from Earth",
    },
    "detail_mass": {
        "ko": "질량",
        "en": "Mass",
    },
    "detail_temperature": {
        "ko": "온도",
        "en": "Temperature",
    },
    "detail_orbital_period": {
        "ko": "공전 주기",
        "en": "Orbital Period",
    },
    "detail_rotation": {
        "ko": "자전 주기",
        "en": "Rotation",
    },
    "detail_axial_tilt": {
        "ko": "자전축 기울기",
        "en": "Axial Tilt",
    },
    "error_date": {
        "ko": "날짜를 해석할 수 없어요. YYYY-MM-DD HH:MM 형식으로 입력해보세요. ({error})",
        "en": "Could not read the date. Use YYYY-MM-DD HH:MM. ({error})",
    },
    "error_body": {
        "ko": "천체를 찾을 수 없어요: {body}",
        "en": "Unknown body: {body}",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
