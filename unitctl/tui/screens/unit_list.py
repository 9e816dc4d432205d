from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import DataTable

from unitctl.systemd import SystemCtl, SystemctlError


class UnitListScreen(Screen):
    """A screen to display the unit files known to systemd.
    """

    def __init__(self, manager: SystemCtl) -> None:
        """Initialise the screen.
        """
        super().__init__()
        self._manager = manager
        self._units_table = DataTable()

    def compose(self) -> ComposeResult:
        """Compose the screen.
        """
        yield self._units_table

    async def on_mount(self) -> None:
        """Mount the screen.
        """
        self._units_table.add_column('Unit File')
        self._units_table.add_column('State')
        self._units_table.add_column('Vendor Preset')

        try:
            units = await self._manager.list_units_full()
        except SystemctlError as e:
            self.notify(str(e), severity='error')
            return

        for unit in units:
            vendor_preset = 'unknown'
            if unit.vendor_preset is not None:
                vendor_preset = 'enabled' if unit.vendor_preset \
                    else 'disabled'

            self._units_table.add_row(
                unit.unit_file,
                unit.state,
                vendor_preset,
            )
