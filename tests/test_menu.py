from phantom_mansion.menu import Menu, Screen


def _inside(rect):
    return rect.x + rect.width / 2, rect.y + rect.height / 2


def test_starts_on_menu():
    assert Menu().screen is Screen.MENU


def test_button_positions_from_layout():
    menu = Menu()
    assert (menu.start_button.x, menu.start_button.y) == (1250, 750)
    assert (menu.back_button.x, menu.back_button.y) == (1250, 100)


def test_click_start_enters_gameplay():
    menu = Menu()
    assert menu.update(*_inside(menu.start_button), True) is Screen.GAMEPLAY


def test_hover_without_release_stays():
    menu = Menu()
    assert menu.update(*_inside(menu.start_button), False) is Screen.MENU
    assert menu.over_start
    assert not menu.over_credits


def test_click_credits_and_back():
    menu = Menu()
    assert menu.update(*_inside(menu.credits_button), True) is Screen.CREDITS
    assert menu.over_credits
    assert menu.update(*_inside(menu.back_button), True) is Screen.MENU


def test_start_button_inactive_on_credits():
    menu = Menu(screen=Screen.CREDITS)
    assert menu.update(*_inside(menu.start_button), True) is Screen.CREDITS


def test_back_button_inactive_on_menu():
    menu = Menu()
    assert menu.update(*_inside(menu.back_button), True) is Screen.MENU
    assert menu.over_back


def test_gameplay_is_final():
    menu = Menu(screen=Screen.GAMEPLAY)
    for button in (menu.start_button, menu.credits_button, menu.back_button):
        assert menu.update(*_inside(button), True) is Screen.GAMEPLAY


def test_click_outside_buttons():
    menu = Menu()
    assert menu.update(0, 0, True) is Screen.MENU
    assert not (menu.over_start or menu.over_credits or menu.over_back)