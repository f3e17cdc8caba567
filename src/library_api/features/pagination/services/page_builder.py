"""Page builder turning a count query and a slice query into a page."""

import logging
from typing import Callable, Sequence, TypeVar

from ..entities import PageDescriptor, PageRequest

logger = logging.getLogger(__name__)

T = TypeVar('T')

CountFn = Callable[[], int]
SliceFn = Callable[[int, int], Sequence[T]]


class PageBuilder:
    """Builds page descriptors from an external query layer.

    Counting and slicing are two distinct calls: the slice on the last page
    can be shorter than the page size, so the total never comes from it.
    """

    @staticmethod
    def build(
        count_fn: CountFn,
        slice_fn: SliceFn,
        page_number: int,
        page_size: int,
        max_page_size: int
    ) -> PageDescriptor[T]:
        """Count the full result set, fetch one slice and describe the page.

        Args:
            count_fn: Returns the size of the full filtered result set
            slice_fn: Returns ``limit`` rows starting at ``offset``
            page_number: Requested page (clamped to >= 1)
            page_size: Requested page size (clamped to [1, max_page_size])
            max_page_size: Upper bound for the page size

        Returns:
            Page descriptor; a page past the end has no items but valid metadata
        """
        request = PageRequest.clamped(page_number, page_size, max_page_size)

        total_count = max(count_fn(), 0)
        total_pages = (total_count + request.page_size - 1) // request.page_size

        if request.page_number > max(total_pages, 1):
            logger.debug(
                f"Page {request.page_number} is past the last page ({total_pages}), "
                f"returning an empty page"
            )
            items = []
        else:
            items = list(slice_fn(request.offset, request.limit))

        current_page = min(request.page_number, max(total_pages, 1))

        logger.debug(
            f"Built page {current_page}/{total_pages} "
            f"(size={request.page_size}, total={total_count}, items={len(items)})"
        )

        return PageDescriptor(
            items=items,
            total_count=total_count,
            page_size=request.page_size,
            current_page=current_page,
        )
