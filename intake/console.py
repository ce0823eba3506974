"""Terminal front end for the application form and the HR screens."""

import logging
from typing import Callable, Optional, Sequence

from .catalog import (
    EXPERIENCE_OPTIONS,
    HINTS,
    LEVEL_LABELS,
    SALARY_OPTIONS,
    SALES_TYPES,
    SCHEDULES,
    SOURCE_OPTIONS,
    START_DATE_OPTIONS,
    LanguageLevel,
)
from .navigation import Step
from .session import Session

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\033[H\033[2J"


class ConsoleApp:
    """Renders the current screen and feeds user answers into the session."""

    def __init__(
        self,
        session: Session,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
        read_secret: Optional[Callable[[str], str]] = None,
    ):
        self.session = session
        self.read = read
        self.write = write
        self.read_secret = read_secret or read
        self.session.navigator.on_enter(self._scroll_to_top)

    def _scroll_to_top(self, step: Step) -> None:
        self.write(CLEAR_SCREEN)

    def run(self) -> None:
        screens = {
            Step.FORM: self.form_screen,
            Step.THANKS: self.thanks_screen,
            Step.LOGIN: self.login_screen,
            Step.ADMIN: self.admin_screen,
        }
        try:
            while True:
                screens[self.session.step]()
        except (EOFError, KeyboardInterrupt):
            self.write("")
            logger.info("Console session closed")

    # Prompts

    def ask_text(self, field: str, label: str) -> None:
        current = getattr(self.session.draft, field)
        self.write(f"  ({HINTS[field]})")
        answer = self.read(f"{label} [{current}]: ").strip()
        if answer:
            self.session.update(field, answer)

    def ask_choice(self, field: str, label: str, options: Sequence[str]) -> None:
        self.write(f"{label}  ({HINTS[field]})")
        for i, option in enumerate(options, start=1):
            self.write(f"  {i}. {option}")
        answer = self.read("Тандаңыз (номер): ").strip()
        if answer.isdigit() and 1 <= int(answer) <= len(options):
            self.session.update(field, options[int(answer) - 1])

    def ask_schedule(self) -> None:
        self.write(f"Иш графиги  ({HINTS['schedule']})")
        for i, schedule in enumerate(SCHEDULES, start=1):
            self.write(f"  {i}. {schedule.display()}  {schedule.sub}")
        answer = self.read("Тандаңыз (номер): ").strip()
        if answer.isdigit() and 1 <= int(answer) <= len(SCHEDULES):
            self.session.update("schedule", SCHEDULES[int(answer) - 1].id.value)

    def ask_sales_types(self) -> None:
        self.write(f"Сатуу багыты  ({HINTS['sales_type']})")
        for i, sales_type in enumerate(SALES_TYPES, start=1):
            mark = "☑" if sales_type.id.value in self.session.draft.sales_type else "☐"
            self.write(f"  {i}. {mark} {sales_type.label} — {sales_type.desc}")
        answer = self.read("Белгилөө/алып салуу (мис. 1,3): ")
        for part in answer.split(","):
            part = part.strip()
            if part.isdigit() and 1 <= int(part) <= len(SALES_TYPES):
                self.session.toggle_sales_type(SALES_TYPES[int(part) - 1].id.value)

    def edit_languages(self) -> None:
        self.write(f"Тилдер  ({HINTS['languages']})")
        levels = ", ".join(f"{lvl.value}={lvl.label}" for lvl in LanguageLevel)
        while True:
            editor = self.session.languages
            for entry in editor.entries:
                self.write(f"  {entry.id}: {entry.display()} ({entry.level.value}/5)")
            remaining = ", ".join(f"{o.id} ({o.label})" for o in editor.remaining_options())
            if remaining:
                self.write(f"  Кошууга болот: {remaining}")
            self.write(f"  Деңгээлдер: {levels}")
            answer = self.read("+id кошуу, -id өчүрүү, id=N деңгээл, Enter бүттү: ").strip()
            if not answer:
                return
            if answer.startswith("+"):
                self.session.add_language(answer[1:].strip())
            elif answer.startswith("-"):
                self.session.remove_language(answer[1:].strip())
            elif "=" in answer:
                language_id, _, level = answer.partition("=")
                if level.strip().isdigit() and int(level) in LEVEL_LABELS:
                    self.session.set_language_level(language_id.strip(), int(level))

    # Screens

    def show_errors(self) -> None:
        for field, message in self.session.errors.items():
            self.write(f"  ✗ {field}: {message}")

    def form_screen(self) -> None:
        session = self.session
        self.write("=== Сатуу менеджери — арыз ===")
        self.ask_text("name", "Аты-жөнү *")
        self.ask_text("phone", "Телефон номери * (+996 (7__) ___-___)")
        self.ask_text("city", "Шаар *")
        self.ask_schedule()
        self.ask_choice("experience", "Сатуудагы тажрыйба *", EXPERIENCE_OPTIONS)
        self.ask_sales_types()
        self.ask_choice("salary", "Күтүлгөн айлык", SALARY_OPTIONS)
        self.ask_choice("start_date", "Качан башташка даярсыз?", START_DATE_OPTIONS)
        self.edit_languages()
        self.ask_text("about", "Өзүңүз жөнүндө айтыңыз")
        self.ask_choice("source", "Биз жөнүндө кайдан уктуңуз?", SOURCE_OPTIONS)

        while session.step == Step.FORM:
            self.show_errors()
            if session.send_failed:
                self.write("Жиберүүдө ката кетти. Кайра аракет кылыңыз.")
            answer = self.read("[s] жиберүү, [e] оңдоо, [hr] HR кирүү: ").strip().lower()
            if answer == "s":
                self.write("Жиберилүүдө...")
                session.submit()
            elif answer == "e":
                return
            elif answer == "hr":
                session.open_login()

    def thanks_screen(self) -> None:
        self.write("✓ Арызыңыз кабыл алынды!")
        self.write("HR адиси арызыңызды карап, 1–2 жумуш күнүнүн ичинде байланышат.")
        self.read("Дагы бир арыз берүү үчүн Enter басыңыз ")
        self.session.submit_another()

    def login_screen(self) -> None:
        self.write("=== HR кирүү ===")
        if self.session.login_failed:
            self.write("Сырсөз туура эмес")
        secret = self.read_secret("Сырсөз (бош калтырсаңыз — арызга кайтуу): ")
        if not secret:
            self.session.back()
        else:
            self.session.login(secret)

    def admin_screen(self) -> None:
        entries = self.session.review()
        self.write(f"=== Арыздар саны: {len(entries)} ===")
        if not entries:
            self.write("Азырынча арыздар жок")
        for entry in entries:
            record = entry.record
            self.write(f"#{entry.number}  {record.timestamp}  {entry.time_range}")
            self.write(f"  {record.name}")
            self.write(f"  📞 {record.phone}  📍 {record.city}")
            details = [f"💼 {record.experience}"]
            if record.salary:
                details.append(f"💰 {record.salary}")
            if record.start_date:
                details.append(f"📅 {record.start_date}")
            self.write("  " + "  ".join(details))
            for text in (record.sales_type, record.languages, record.about, record.source):
                if text:
                    self.write(f"  {text}")

        answer = self.read("[x] Excel жүктөө, [b] арызга: ").strip().lower()
        if answer == "x":
            path = self.session.export()
            if path:
                self.write(f"Сакталды: {path}")
        elif answer == "b":
            self.session.back()
