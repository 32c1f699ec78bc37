import pytest

from ember.interpreter import Interpreter


# Most tests run a snippet through a fresh Interpreter and look at the value of
# the last statement plus whatever diagnostics were reported on the way.


@pytest.fixture
def itp():
    return Interpreter()


@pytest.fixture
def run(itp):
    """Evaluate source in the fixture interpreter and return the last value."""
    def _run(source):
        return itp.eval(source)
    return _run


@pytest.fixture
def run_ok(itp):
    """Like `run`, but also asserts nothing was reported."""
    def _run_ok(source):
        result = itp.eval(source)
        assert itp.diagnostics == [], [d.format() for d in itp.diagnostics]
        return result
    return _run_ok


@pytest.fixture
def messages(itp):
    def _messages():
        return itp.reporter.messages()
    return _messages
