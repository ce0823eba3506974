"""Fixed reference tables for the application form."""

from enum import Enum, IntEnum
from typing import NamedTuple, Optional


class ScheduleId(str, Enum):
    MORNING = "morning"
    EVENING = "evening"
    ANY = "any"


class SalesTypeId(str, Enum):
    B2C = "b2c"
    B2B = "b2b"
    TELE = "tele"
    ONLINE = "online"


class LanguageLevel(IntEnum):
    """Proficiency scale, 1 (beginner) to 5 (fluent)."""

    BEGINNER = 1
    INTERMEDIATE = 2
    GOOD = 3
    VERY_GOOD = 4
    FLUENT = 5

    @property
    def label(self) -> str:
        return LEVEL_LABELS[self]

    @property
    def color(self) -> str:
        return LEVEL_COLORS[self]


class Schedule(NamedTuple):
    id: ScheduleId
    emoji: str
    label: str
    time: str
    sub: str
    hours: tuple[int, ...]

    def display(self) -> str:
        return f"{self.emoji} {self.label} · {self.time}"


class SalesType(NamedTuple):
    id: SalesTypeId
    label: str
    desc: str


class LanguageOption(NamedTuple):
    id: str
    label: str


LEVEL_LABELS = {
    LanguageLevel.BEGINNER: "Башталгыч",
    LanguageLevel.INTERMEDIATE: "Орточо",
    LanguageLevel.GOOD: "Жакшы",
    LanguageLevel.VERY_GOOD: "Өтө жакшы",
    LanguageLevel.FLUENT: "Эркин",
}

LEVEL_COLORS = {
    LanguageLevel.BEGINNER: "#ef4444",
    LanguageLevel.INTERMEDIATE: "#f97316",
    LanguageLevel.GOOD: "#eab308",
    LanguageLevel.VERY_GOOD: "#22c55e",
    LanguageLevel.FLUENT: "#1a73e8",
}

DEFAULT_LEVEL = LanguageLevel.GOOD

LANGUAGE_OPTIONS: tuple[LanguageOption, ...] = (
    LanguageOption("ky", "Кыргызча"),
    LanguageOption("ru", "Орусча"),
    LanguageOption("en", "Англисче"),
    LanguageOption("zh", "Кытайча"),
    LanguageOption("tr", "Түркчө"),
)

# (language id, level) pairs every new draft starts with
INITIAL_LANGUAGES: tuple[tuple[str, LanguageLevel], ...] = (
    ("ky", LanguageLevel.FLUENT),
    ("ru", LanguageLevel.GOOD),
)

SCHEDULES: tuple[Schedule, ...] = (
    Schedule(
        id=ScheduleId.MORNING,
        emoji="🌅",
        label="Эртең – Күндүз",
        time="10:00 – 18:00",
        sub="Дш–Шб · эс алуу: жекшемби + 1 жумуш күнү",
        hours=(10, 11, 12, 13, 14, 15, 16, 17),
    ),
    Schedule(
        id=ScheduleId.EVENING,
        emoji="🌆",
        label="Күндүз – Кеч",
        time="14:00 – 22:00",
        sub="Дш–Шб · эс алуу: жекшемби + 1 жумуш күнү",
        hours=(14, 15, 16, 17, 18, 19, 20, 21),
    ),
    Schedule(
        id=ScheduleId.ANY,
        emoji="✅",
        label="Каалаган",
        time="Экөө тең",
        sub="Каалаган убакытта иштөөгө даярмын",
        hours=(),
    ),
)

SALES_TYPES: tuple[SalesType, ...] = (
    SalesType(SalesTypeId.B2C, "B2C", "Жеке адамдарга сатуу"),
    SalesType(SalesTypeId.B2B, "B2B", "Корпоративдик кардарлар"),
    SalesType(SalesTypeId.TELE, "Телемаркетинг", "Муздак чалуулар"),
    SalesType(SalesTypeId.ONLINE, "Онлайн", "Мессенджерлер / соцтармактар"),
)

ALL_HOURS = tuple(range(8, 23))

EXPERIENCE_OPTIONS = [
    "Тажрыйба жок (үйрөнүүгө даярмын)",
    "1 жылга чейин",
    "1–3 жыл",
    "3–5 жыл",
    "5 жылдан ашык",
]

SALARY_OPTIONS = [
    "30 000 сомго чейин",
    "30 000–50 000 сом",
    "50 000–80 000 сом",
    "80 000 сомдон ашык",
    "Талкуулоодо",
]

START_DATE_OPTIONS = [
    "Дароо",
    "1 жумадан кийин",
    "2 жумадан кийин",
    "1 айдан кийин",
]

SOURCE_OPTIONS = [
    "Hh.kg (HeadHunter)",
    "Нomework.kg",
    "Dostuk (Дос айтты)",
    "Социалдык тармактар",
    "Башка",
]

HINTS = {
    "name": "Толук аты-жөңүздү жазыңыз: Фамилия Аты Атасынын аты",
    "phone": "Биз ушул номерге чалып, жолугушуга чакырабыз",
    "city": "Иштөөгө даяр шаарыңызды көрсөтүңүз",
    "schedule": "Ыңгайлуу иш убактыңызды тандаңыз — жолугушууда талкуулай алабыз",
    "experience": "Тажрыйба болбосо да жарайт — биз нөлдөн үйрөтөбүз",
    "sales_type": "Тажрыйбаңыз же кызыгуу бар бардык багытты белгилеңиз",
    "salary": "Каалаган айлыгыңызды айтыңыз — биз компромисс табабыз",
    "start_date": "Учурдагы иштен чыгуу убактыңыз болсо, айтыңыз",
    "languages": "Сүйлөгөн тилдериңизди жана деңгээлиңизди белгилеңиз",
    "about": "Эң жакшы натыйжаларыңыз, жетишкендиктериңиз жөнүндө айтып бериңиз",
    "source": "Биз жакшы кандидаттарды кайдан таба аларыбызды билгибиз келет",
}


def find_schedule(schedule_id: str) -> Optional[Schedule]:
    """Look up a schedule definition, None if the id is unknown."""
    for schedule in SCHEDULES:
        if schedule.id.value == schedule_id:
            return schedule
    return None


def find_sales_type(sales_type_id: str) -> Optional[SalesType]:
    """Look up a sales type definition, None if the id is unknown."""
    for sales_type in SALES_TYPES:
        if sales_type.id.value == sales_type_id:
            return sales_type
    return None


def find_language(language_id: str) -> Optional[LanguageOption]:
    for option in LANGUAGE_OPTIONS:
        if option.id == language_id:
            return option
    return None
