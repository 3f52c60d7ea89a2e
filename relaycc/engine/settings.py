from __future__ import annotations

import dataclasses
from typing import Optional

from relaycc.args import WindowArgs


@dataclasses.dataclass(frozen=True)
class PagerSettings:
    """ Settings for paginated queries

    This object defines additional behavior for the requests: default and max page sizes
    """
    # The page size you get by default, if neither `first` nor `last` is specified
    default_limit: Optional[int] = None

    # The max number of items you get, regardless of `first` and `last`
    max_limit: Optional[int] = None

    def get_final_args(self, args: WindowArgs) -> WindowArgs:
        """ Callback that fine-tunes the window arguments by applying default and max limits

        Used by: CompiledQuery to decide on the final bind parameters
        """
        # Apply default limit
        if args.forward_count is None and args.backward_count is None and self.default_limit:
            args = args.first(self.default_limit)

        # Apply max limit
        if self.max_limit:
            if args.forward_count is not None and args.forward_count > self.max_limit:
                args = args.first(self.max_limit)
            if args.backward_count is not None and args.backward_count > self.max_limit:
                args = args.last(self.max_limit)

        # Done
        return args
