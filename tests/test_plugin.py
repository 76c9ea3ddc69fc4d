import pytest

from almondshell.plugin import Plugin, plugin_session


class Recorder(Plugin):
    def __init__(self):
        self.calls = []

    def initialize(self):
        self.calls.append("init")

    def shutdown(self):
        self.calls.append("shutdown")


def test_plugin_is_abstract():
    with pytest.raises(TypeError):
        Plugin()


def test_session_initializes_and_shuts_down():
    plugin = Recorder()
    with plugin_session(plugin) as active:
        assert active is plugin
        assert plugin.calls == ["init"]
    assert plugin.calls == ["init", "shutdown"]


def test_session_shuts_down_on_error():
    plugin = Recorder()
    with pytest.raises(RuntimeError):
        with plugin_session(plugin):
            raise RuntimeError("boom")
    assert plugin.calls == ["init", "shutdown"]