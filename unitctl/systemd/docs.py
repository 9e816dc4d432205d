import logging
from collections.abc import Iterable

from unitctl.systemd.errors import MalformedDescriptorError
from unitctl.systemd.models import Doc, ManDoc, UrlDoc

logger = logging.getLogger(__name__)

MAN_SCHEME = 'man'
URL_SCHEMES = ('http', 'https')


def parse_doc(descriptor: str) -> Doc:
    """Build a Doc from one systemd documentation descriptor.

    `man:cron(8)` becomes `ManDoc('cron')`, `https://example.org`
    becomes `UrlDoc('https://example.org')`.

    Raises:
        MalformedDescriptorError: If the descriptor is not exactly
            `scheme:payload` or the scheme is unknown
    """
    items = descriptor.split(':')
    if len(items) != 2:
        raise MalformedDescriptorError(
            f'Malformed doc descriptor: {descriptor!r}'
        )

    scheme, payload = items
    if scheme == MAN_SCHEME:
        return ManDoc(reference=payload.split('(')[0])
    if scheme in URL_SCHEMES:
        return UrlDoc(address=f'{scheme}:{payload.strip()}')

    raise MalformedDescriptorError(f'Unknown type of doc: {scheme!r}')


def parse_docs(descriptors: Iterable[str]) -> list[Doc]:
    """Parse descriptors, skipping the ones that are malformed.
    """
    docs = []
    for descriptor in descriptors:
        try:
            docs.append(parse_doc(descriptor))
        except MalformedDescriptorError as e:
            logger.debug('Skipping doc descriptor: %s', e)
    return docs
