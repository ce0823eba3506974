import pytest

from intake.navigation import InvalidTransition, Navigator, Step


def test_starts_on_form_and_notifies_on_enter() -> None:
    nav = Navigator()
    entered = []
    nav.on_enter(entered.append)

    nav.go(Step.LOGIN)
    nav.go(Step.ADMIN)
    nav.go(Step.FORM)

    assert nav.step == Step.FORM
    assert entered == [Step.LOGIN, Step.ADMIN, Step.FORM]


def test_rejects_transitions_outside_the_table() -> None:
    nav = Navigator()
    with pytest.raises(InvalidTransition):
        nav.go(Step.ADMIN)
    with pytest.raises(InvalidTransition):
        Navigator(Step.THANKS).go(Step.LOGIN)
    assert nav.step == Step.FORM
