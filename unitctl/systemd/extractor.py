import logging

from unitctl.systemd.directives import DirectiveParser
from unitctl.systemd.models import Unit
from unitctl.systemd.status import StatusParser


class UnitFieldExtractor:
    """Builds a Unit from captured `status` and `cat` output.

    Only a missing header or an unknown unit type fails the record.
    Anything else that is malformed leaves its field unset.
    """

    def __init__(
        self,
        status_parser: StatusParser | None = None,
        directive_parser: DirectiveParser | None = None,
    ) -> None:
        """Initialize with optional parsers.
        """
        self._logger = logging.getLogger(__name__)

        self._status_parser = status_parser or StatusParser()
        self._directive_parser = directive_parser or DirectiveParser()

    def extract(
        self,
        status: str,
        directives: str = '',
        active: bool = False,
    ) -> Unit:
        """Build a Unit.

        Args:
            status: Captured stdout of `systemctl status <unit>`
            directives: Captured stdout of `systemctl cat <unit>`
            active: Result of the separate `is-active` probe

        Returns:
            The populated Unit

        Raises:
            DecodeFailureError: If the unit type cannot be decoded
        """
        fields = self._status_parser.parse(status)
        fields.update(self._directive_parser.parse(directives))
        fields['active'] = active

        unit = Unit(**fields)
        self._logger.debug('Extracted unit %s', unit.unit_file)
        return unit


def extract_unit(
    status: str,
    directives: str = '',
    active: bool = False,
) -> Unit:
    """Build a Unit with the default parsers.
    """
    return UnitFieldExtractor().extract(status, directives, active)
