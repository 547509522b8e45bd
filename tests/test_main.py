import pytest

from jumpboi import main as main_module
from jumpboi.config.settings import get_settings
from jumpboi.core.events import Event, EventBus, EventType


@pytest.fixture
def fresh_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_build_controller_is_attached(settings):
    bus = EventBus()
    controller = main_module.build_controller(settings, bus)

    bus.emit(Event(EventType.JUMP))

    assert not controller.session.actor.grounded


def test_invalid_config_exits_with_status_1(settings, monkeypatch, fresh_settings_cache):
    monkeypatch.setattr("dotenv.load_dotenv", lambda *args, **kwargs: False)
    monkeypatch.setenv("JUMPBOI_PHYSICS__GRAVITY", "-1")

    with pytest.raises(SystemExit) as exc_info:
        main_module.main()

    assert exc_info.value.code == 1


def test_fatal_error_exits_with_status_1(settings, monkeypatch, fresh_settings_cache):
    def explode(settings):
        raise RuntimeError("no terminal")

    monkeypatch.setattr("dotenv.load_dotenv", lambda *args, **kwargs: False)
    monkeypatch.setattr(main_module, "setup_logging", lambda *args, **kwargs: None)
    monkeypatch.setattr(main_module, "run_terminal", explode)

    with pytest.raises(SystemExit) as exc_info:
        main_module.main()

    assert exc_info.value.code == 1


def test_keyboard_interrupt_exits_cleanly(settings, monkeypatch, fresh_settings_cache):
    def interrupted(settings):
        raise KeyboardInterrupt

    monkeypatch.setattr("dotenv.load_dotenv", lambda *args, **kwargs: False)
    monkeypatch.setattr(main_module, "setup_logging", lambda *args, **kwargs: None)
    monkeypatch.setattr(main_module, "run_terminal", interrupted)

    main_module.main()
