"""Frame discovery: contiguous run of frames from a file mask."""

import logging
import os
from typing import Callable, Iterator, List, Tuple, Union

from .errors import NoFramesFoundError
from .template import FrameTemplate

logger = logging.getLogger(__name__)

ExistsFn = Callable[[str], bool]


def _as_template(template: Union[str, FrameTemplate]) -> FrameTemplate:
    if isinstance(template, FrameTemplate):
        return template
    return FrameTemplate.parse(template)


def locate(
    template: Union[str, FrameTemplate],
    start: int = 0,
    exists: ExistsFn = os.path.exists,
) -> Iterator[Tuple[int, str]]:
    """Yield ``(index, path)`` for consecutive existing frames.

    Scanning begins at ``start`` and stops at the first index whose path does
    not exist, or which no longer fits the placeholder width. Frames past the
    first gap are never yielded. An empty run is not an error here.

    Args:
        template: file mask string or parsed FrameTemplate
        start: first index to probe
        exists: path existence predicate (filesystem by default)
    """
    tpl = _as_template(template)
    index = start
    while tpl.fits(index):
        path = tpl.render(index)
        if not exists(path):
            logger.debug("Frame %d missing (%s), stopping scan", index, path)
            return
        yield index, path
        index += 1
    logger.debug("Index %d exceeds capacity of %s, stopping scan", index, tpl)


def locate_frames(
    template: Union[str, FrameTemplate],
    start: int = 0,
    exists: ExistsFn = os.path.exists,
) -> List[Tuple[int, str]]:
    """Materialize :func:`locate`; raise NoFramesFoundError if nothing exists."""
    tpl = _as_template(template)
    frames = list(locate(tpl, start=start, exists=exists))
    if not frames:
        raise NoFramesFoundError(str(tpl), start)
    logger.info("Found %d frames (%d..%d) for %s", len(frames), frames[0][0], frames[-1][0], tpl)
    return frames
