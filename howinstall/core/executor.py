"""Install command execution for how-install.

Runs the resolved install command through a shell with the terminal
attached, so package managers can prompt the user.
"""

import logging
import shutil
import subprocess

logger = logging.getLogger(__name__)


class ExecutionResult:
    """Result from command execution.

    Attributes:
        success: Whether execution was successful
        return_code: Process return code, -1 if it could not be started
        error_message: Error message if the process could not be started
    """

    def __init__(
        self,
        success: bool,
        return_code: int,
        error_message: str = ""
    ):
        self.success = success
        self.return_code = return_code
        self.error_message = error_message

    @property
    def exit_code(self) -> int:
        """Exit code for the calling process."""
        return self.return_code if self.return_code >= 0 else 1


class CommandExecutor:
    """Executes install commands in a shell.

    Standard streams are inherited rather than captured, and no timeout
    is applied.
    """

    def __init__(self, shell: str = "bash"):
        """Initialize command executor.

        Args:
            shell: Shell to run commands with (name or path)
        """
        self.shell = shell

    def execute(self, command: str) -> ExecutionResult:
        """Execute a command and wait for it.

        Args:
            command: Command string to execute

        Returns:
            ExecutionResult with execution details
        """
        shell_path = shutil.which(self.shell) or self.shell
        logger.info("Running %r with %s", command, shell_path)

        try:
            result = subprocess.run([shell_path, "-c", command])
        except OSError as e:
            logger.error("Failed to start %s: %s", shell_path, e)

            return ExecutionResult(
                success=False,
                return_code=-1,
                error_message=f"Execution failed: {e}"
            )

        # Killed by a signal; report the conventional shell code
        return_code = result.returncode if result.returncode >= 0 else 128 - result.returncode

        return ExecutionResult(
            success=return_code == 0,
            return_code=return_code
        )
