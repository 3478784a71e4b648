import logging

from jokes_api.app.core.logging_config import setup_logging


def test_setup_logging_adds_console_and_file_handlers(tmp_path, monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    previous_level = root.level
    logfile = tmp_path / "api.log"
    try:
        setup_logging("debug", str(logfile))
        assert root.level == logging.DEBUG
        assert [type(h) for h in root.handlers] == [logging.StreamHandler, logging.FileHandler]

        # Second call leaves the configuration alone.
        setup_logging("error")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2

        logging.getLogger("jokes_api.test").info("hello from the test")
        for handler in root.handlers:
            handler.flush()
        assert "[INFO] jokes_api.test: hello from the test" in logfile.read_text(encoding="utf-8")
    finally:
        for handler in root.handlers:
            handler.close()
        root.setLevel(previous_level)
        monkeypatch.undo()


def test_setup_logging_unknown_level_falls_back_to_info(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    previous_level = root.level
    try:
        setup_logging("chatty")
        assert root.level == logging.INFO
    finally:
        for handler in root.handlers:
            handler.close()
        root.setLevel(previous_level)
        monkeypatch.undo()
