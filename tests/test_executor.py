"""Test command executor."""

import shutil

import pytest

from howinstall.core.executor import CommandExecutor, ExecutionResult


pytestmark = pytest.mark.skipif(shutil.which("bash") is None, reason="bash not available")


@pytest.fixture
def executor():
    """Create a command executor instance."""
    return CommandExecutor()


def test_executor_initialization():
    """Test executor initialization."""
    executor = CommandExecutor()
    assert executor.shell == "bash"


def test_execute_simple_command(executor):
    """Test executing a simple command."""
    result = executor.execute("true")
    
    assert isinstance(result, ExecutionResult)
    assert result.success is True
    assert result.return_code == 0
    assert result.exit_code == 0


def test_execute_failing_command_keeps_code(executor):
    """The subprocess exit code is preserved."""
    result = executor.execute("exit 3")
    
    assert result.success is False
    assert result.return_code == 3
    assert result.exit_code == 3


def test_execute_uses_shell_syntax(executor, tmp_path):
    """Commands run through the shell, so pipes and && work."""
    marker = tmp_path / "marker"
    result = executor.execute(f"echo hi | cat > {marker} && test -s {marker}")
    
    assert result.success is True
    assert marker.read_text().strip() == "hi"


def test_execute_missing_shell(tmp_path):
    """A shell that can't be started gives a failed result."""
    executor = CommandExecutor(shell=str(tmp_path / "no-such-shell"))
    
    result = executor.execute("true")
    
    assert result.success is False
    assert result.return_code == -1
    assert result.exit_code == 1
    assert "Execution failed" in result.error_message


def test_signal_exit_code(executor):
    """A command killed by a signal reports 128 + signal number."""
    result = executor.execute("kill -TERM $$")
    
    assert result.success is False
    assert result.exit_code == 143
