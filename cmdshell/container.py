"""
Dependency injection container for managing application dependencies.
"""

import logging

import cmdshell
from cmdshell.adapters.console.rich_console_adapter import RichConsoleAdapter
from cmdshell.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from cmdshell.config.settings import Settings
from cmdshell.ports.console.console_port import ConsolePort
from cmdshell.ports.files.directory_repository_port import DirectoryRepositoryPort
from cmdshell.use_cases.files.list_directory import ListDirectoryUseCase
from cmdshell.use_cases.shell.confirm_exit import ConfirmExitUseCase
from cmdshell.use_cases.shell.dispatch_options import DispatchOptionsUseCase
from cmdshell.use_cases.shell.run_shell import RunShellUseCase
from cmdshell.use_cases.shell.show_help import ShowHelpUseCase
from cmdshell.utils.columns import ColumnLayout


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, settings: Settings | None = None):
        self._instances = {}
        self._settings = settings
        self._logger = logging.getLogger(__name__)

    def get_settings(self) -> Settings:
        """
        Get application settings, loaded from the environment on first use.

        Returns:
            Settings instance
        """
        if self._settings is None:
            self._settings = Settings()
        return self._settings

    def get_console(self) -> ConsolePort:
        """
        Get console adapter instance.

        Returns:
            ConsolePort implementation
        """
        if "console" not in self._instances:
            self._instances["console"] = RichConsoleAdapter(logger=self._logger)
        return self._instances["console"]

    def get_directory_repository(self) -> DirectoryRepositoryPort:
        """
        Get directory repository adapter instance.

        Returns:
            DirectoryRepositoryPort implementation
        """
        if "directory_repository" not in self._instances:
            self._instances["directory_repository"] = LocalFileSystemAdapter(self._logger)
        return self._instances["directory_repository"]

    def get_column_layout(self) -> ColumnLayout:
        settings = self.get_settings()
        return ColumnLayout(
            name=settings.name_columns,
            attributes=settings.attribute_columns,
            size=settings.size_columns,
            pad_length=settings.pad_length,
            marker=settings.truncation_marker,
        )

    def get_list_directory_use_case(self) -> ListDirectoryUseCase:
        """
        Get list directory use case with injected dependencies.

        Returns:
            Configured ListDirectoryUseCase
        """
        if "list_directory_use_case" not in self._instances:
            self._instances["list_directory_use_case"] = ListDirectoryUseCase(
                self.get_directory_repository(),
                self.get_console(),
                layout=self.get_column_layout(),
                logger=self._logger,
            )
        return self._instances["list_directory_use_case"]

    def get_show_help_use_case(self) -> ShowHelpUseCase:
        if "show_help_use_case" not in self._instances:
            settings = self.get_settings()
            self._instances["show_help_use_case"] = ShowHelpUseCase(
                self.get_console(),
                pad_length=settings.pad_length,
                marker=settings.truncation_marker,
                logger=self._logger,
            )
        return self._instances["show_help_use_case"]

    def get_dispatch_options_use_case(self) -> DispatchOptionsUseCase:
        """
        Get option dispatcher with the command handlers injected.

        Returns:
            Configured DispatchOptionsUseCase
        """
        if "dispatch_options_use_case" not in self._instances:
            self._instances["dispatch_options_use_case"] = DispatchOptionsUseCase(
                self.get_list_directory_use_case(),
                self.get_show_help_use_case(),
                self.get_console(),
                recursive_list=self.get_settings().list_recursive,
                logger=self._logger,
            )
        return self._instances["dispatch_options_use_case"]

    def get_confirm_exit_use_case(self) -> ConfirmExitUseCase:
        if "confirm_exit_use_case" not in self._instances:
            self._instances["confirm_exit_use_case"] = ConfirmExitUseCase(
                self.get_console(),
                exit_delay=self.get_settings().exit_delay,
                logger=self._logger,
            )
        return self._instances["confirm_exit_use_case"]

    def get_run_shell_use_case(self) -> RunShellUseCase:
        """
        Get the shell loop with all of its collaborators.

        Returns:
            Configured RunShellUseCase
        """
        if "run_shell_use_case" not in self._instances:
            settings = self.get_settings()
            self._instances["run_shell_use_case"] = RunShellUseCase(
                self.get_dispatch_options_use_case(),
                self.get_confirm_exit_use_case(),
                self.get_console(),
                prompt=settings.prompt,
                terminators=settings.terminators,
                title=cmdshell.__title__,
                logger=self._logger,
            )
        return self._instances["run_shell_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
