"""
Tests for module-scoped logging.
"""

from duckshoot.logging import (
    LogLevel,
    configure_logging,
    disable_logging,
    enable_all_logging,
    get_logger,
    reset_logging,
)


class TestGameLogger:

    def test_info_format(self, capsys):
        configure_logging(level='INFO')
        get_logger('round').info("Duck shot, %d more to go.", 2)

        out = capsys.readouterr().out
        assert out == "[round] INFO: Duck shot, 2 more to go.\n"

    def test_below_level_dropped(self, capsys):
        configure_logging(level='WARNING')
        log = get_logger('round')
        log.info("hidden")
        log.warning("shown")

        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "[round] WARN: shown" in out

    def test_module_level_overrides_default(self, capsys):
        configure_logging(level='ERROR', modules={'scheduler': 'DEBUG'})

        get_logger('scheduler').debug("tick")
        get_logger('duck').debug("flap")

        out = capsys.readouterr().out
        assert "[scheduler] DEBUG: tick" in out
        assert "flap" not in out

    def test_bad_format_args_still_logged(self, capsys):
        configure_logging(level='INFO')
        get_logger('engine').info("value %d", "not-a-number")

        out = capsys.readouterr().out
        assert "value %d" in out

    def test_loggers_are_cached(self):
        assert get_logger('audio') is get_logger('audio')

    def test_disable_and_enable_all(self, capsys):
        log = get_logger('dog')

        disable_logging()
        log.critical("nothing")
        assert capsys.readouterr().out == ""

        enable_all_logging()
        assert log.level == LogLevel.TRACE
        log.trace("everything")
        assert "[dog] TRACE: everything" in capsys.readouterr().out

    def test_env_configuration(self, monkeypatch):
        monkeypatch.setenv('DUCKSHOOT_LOG_LEVEL', 'ERROR')
        monkeypatch.setenv('DUCKSHOOT_LOG_AUDIO', 'OFF')
        reset_logging()

        assert get_logger('round').level == LogLevel.ERROR
        assert get_logger('audio').level == LogLevel.OFF

    def test_unknown_level_falls_back_to_info(self):
        configure_logging(level='LOUD')
        assert get_logger('session').level == LogLevel.INFO

    def test_exception_includes_traceback(self, capsys):
        configure_logging(level='INFO')
        log = get_logger('engine')
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            log.exception("Frame failed")

        out = capsys.readouterr().out
        assert "[engine] ERROR: Frame failed" in out
        assert "RuntimeError: boom" in out
