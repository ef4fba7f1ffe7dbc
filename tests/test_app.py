import pygame
import pytest

from xonixgrid.app import EndState, GameController, InGameState, WelcomeState, main
from xonixgrid.errors import FileNotFound, GameError
from xonixgrid.player import Direction


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "game_data.txt"
    path.write_text("30 20 3\n50 2\n60 (5,5) (10,10)\n", encoding="utf-8")
    return path


@pytest.fixture
def controller(data_file):
    return GameController(str(data_file))


def _center(rect):
    return (rect.left + rect.width / 2, rect.top + rect.height / 2)


def test_controller_loads_data(controller):
    assert controller.game_data.num_of_lives == 3
    assert controller.game_data.screen_size == (30, 20)
    assert [level.required_percentage for level in controller.levels] == [50, 60]
    assert isinstance(controller.state, WelcomeState)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFound):
        GameController(str(tmp_path / "absent.txt"))


def test_switch_state_is_deferred(controller):
    first = controller.state
    target = EndState(controller, 0, won=True)
    controller.switch_state(target)
    assert controller.state is first
    assert controller.apply_pending() is True
    assert controller.state is target
    assert controller.apply_pending() is False


def test_welcome_play_release_starts_first_level(controller):
    state = controller.state
    event = pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=_center(state.play_button))
    state.handle_event(event)
    assert state.hovered is True
    state.update(0.0)
    pending = controller.pending_state
    assert isinstance(pending, InGameState)
    assert (pending.level, pending.score) == (0, 0)


def test_welcome_release_outside_button_does_nothing(controller):
    state = controller.state
    event = pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=(0, 0))
    state.handle_event(event)
    state.update(0.0)
    assert controller.pending_state is None
    assert state.hovered is False


def test_welcome_render_without_background_raises(controller):
    surface = pygame.Surface(controller.window_size)
    with pytest.raises(GameError):
        controller.state.render(surface)


def test_no_lives_leads_to_loss(controller):
    state = InGameState(controller, 0, 7)
    state.board.player.lives = 0
    state.check_progress()
    pending = controller.pending_state
    assert isinstance(pending, EndState)
    assert pending.won is False
    assert pending.score == 7
    assert pending.message == "You Lost :("


def test_reaching_target_moves_to_next_level(controller):
    state = InGameState(controller, 0, 5)
    board_score = state.board.score
    state.board.area_closer.percent_filled = 100.0
    state.check_progress()
    pending = controller.pending_state
    assert isinstance(pending, InGameState)
    assert pending.level == 1
    assert pending.score == 5 + board_score


def test_reaching_target_on_last_level_wins(controller):
    state = InGameState(controller, 1, 0)
    state.board.area_closer.percent_filled = 60.0
    state.check_progress()
    pending = controller.pending_state
    assert isinstance(pending, EndState)
    assert pending.won is True
    assert pending.message == "You Won!"


def test_below_target_keeps_playing(controller):
    state = InGameState(controller, 0, 0)
    state.board.area_closer.percent_filled = 49.0
    state.check_progress()
    assert controller.pending_state is None


def test_in_game_update_moves_player_and_fills_hud(controller):
    state = InGameState(controller, 0, 0)
    state.board.enemies = []
    controller.direction = Direction.RIGHT
    state.update(0.1)
    assert state.board.player.position[0] > 0.0
    assert state.board.player.position[1] == 0.0
    assert state.hud.level == 1
    assert state.hud.lives == 3
    assert state.board.time_left < 180.0


def test_in_game_render_draws_blue_border(controller):
    state = InGameState(controller, 0, 0)
    state.board.enemies = []
    state.board.player.position = (100.0, 100.0)
    surface = pygame.Surface(controller.window_size)
    state.render(surface)
    assert tuple(surface.get_at((controller.window_size[0] - 1, controller.window_size[1] - 1)))[:3] == (0, 0, 255)
    assert tuple(surface.get_at((101, 101)))[:3] == (255, 0, 0)


def test_end_state_restart_click(controller):
    state = EndState(controller, 12, won=True)
    assert state.score_text == "Your Score: 12"
    assert state.click(_center(state.restart_button)) == "restart"
    assert isinstance(controller.pending_state, WelcomeState)
    assert controller.running is True


def test_end_state_quit_click(controller):
    state = EndState(controller, 0, won=False)
    assert state.click(_center(state.quit_button)) == "quit"
    assert controller.running is False


def test_end_state_click_elsewhere(controller):
    state = EndState(controller, 0, won=False)
    assert state.click((0, 0)) is None
    assert controller.pending_state is None
    assert controller.running is True


def test_end_state_buttons_do_not_overlap(controller):
    state = EndState(controller, 0, won=True)
    assert not state.restart_button.intersects(state.quit_button)
    assert state.restart_button.right < state.quit_button.left


def test_end_state_events(controller):
    state = EndState(controller, 0, won=True)
    press = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=_center(state.restart_button))
    state.handle_event(press)
    assert isinstance(controller.pending_state, WelcomeState)
    state.handle_event(pygame.event.Event(pygame.QUIT))
    assert controller.running is False


def test_main_reports_missing_file(tmp_path, capsys):
    missing = tmp_path / "absent.txt"
    assert main([str(missing)]) == 0
    assert f"Path {missing} not found" in capsys.readouterr().out


def test_main_reports_other_errors(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("30 20 3\n50 (5;5)\n", encoding="utf-8")
    assert main([str(path)]) == 3
    assert "got: invalid tuple format" in capsys.readouterr().err