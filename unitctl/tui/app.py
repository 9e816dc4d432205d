from textual.app import App

from unitctl.systemd import SystemCtl
from unitctl.tui.screens.unit_list import UnitListScreen


class UnitctlApp(App[None]):
    """A textual application to browse systemd units.
    """

    def __init__(self, manager: SystemCtl | None = None, *args, **kwargs):
        """Initialize the app with the systemctl manager.
        """
        super().__init__(*args, **kwargs)
        self._manager = manager or SystemCtl()

    async def on_mount(self) -> None:
        """Mount the main screen.
        """
        self.push_screen(UnitListScreen(self._manager))
