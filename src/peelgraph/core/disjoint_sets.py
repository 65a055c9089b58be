"""
Disjoint sets (union-find) with union by rank and path compression.

The structure tracks a partition of hashable elements that only ever grows:
elements are added one at a time as singleton sets, sets are merged with join(),
and nothing is ever split or removed. Combining union by rank with path
compression gives an amortized inverse-Ackermann cost per find() and join().

Besides the parent forest, the structure keeps the member set of every root, so
both the whole partition (sets()) and the set of one element (set()) are available
without a scan.

Note that find() mutates the forest: every element on the lookup path is
re-parented directly to the root. The lookup itself is a pure walk (_locate) and
the compression is a separate, explicit step.
"""

import logging
from typing import Dict, Generic, Iterator, List, Set, Tuple

from .exceptions import CorruptedParentError, ElementExistsError, NoSuchElementError
from .types import N

logger = logging.getLogger(__name__)

_NO_MEMBER = object()


class DisjointSets(Generic[N]):
    """
    Union-find over arbitrary hashable elements.

    Attributes:
        _parent (Dict): Parent link of every element; roots point to themselves
        _rank (Dict): Upper bound on the height of the tree below each element
        _members (Dict[N, Set[N]]): Member set of every root
    """

    def __init__(self):
        self._parent: Dict[N, N] = {}
        self._rank: Dict[N, int] = {}
        self._members: Dict[N, Set[N]] = {}

    def __len__(self) -> int:
        return len(self._parent)

    def __contains__(self, element: object) -> bool:
        return element in self._parent

    def __iter__(self) -> Iterator[N]:
        return iter(self._parent)

    def add(self, element: N, member=_NO_MEMBER) -> None:
        """
        Add an element, either as a singleton set or straight into member's set.

        Args:
            element: The element to add
            member: Optional element whose set the new element joins

        Raises:
            ElementExistsError: If element was already added
            NoSuchElementError: If member is given but was never added. Nothing is
                added in that case.
        """
        if element in self._parent:
            raise ElementExistsError(element)
        if member is not _NO_MEMBER and member not in self._parent:
            raise NoSuchElementError(member)
        self._parent[element] = element
        self._rank[element] = 0
        self._members[element] = {element}
        if member is not _NO_MEMBER:
            self.join(element, member)

    def _locate(self, element: N) -> Tuple[N, List[N]]:
        """
        Walk the parent links from element to its root without changing anything.

        Returns:
            Tuple: The root and the elements visited before it, starting with element

        Raises:
            NoSuchElementError: If element was never added
            CorruptedParentError: If a parent link points outside the structure
        """
        if element not in self._parent:
            raise NoSuchElementError(element)
        path: List[N] = []
        current = element
        parent = self._parent[current]
        while parent != current:
            if parent not in self._parent:
                logger.error(f"Dangling parent link from '{current}' to '{parent}'")
                raise CorruptedParentError(current)
            path.append(current)
            current = parent
            parent = self._parent[current]
        return current, path

    def _compress(self, root: N, path: List[N]) -> None:
        """Re-parent every element of path directly to root."""
        # Membership is keyed by root, so it is unaffected.
        for element in path:
            self._parent[element] = root

    def find(self, element: N) -> N:
        """
        Find the representative of an element's set, compressing the lookup path.

        Args:
            element: The element to look up

        Returns:
            The root element of the set containing element

        Raises:
            NoSuchElementError: If element was never added
            CorruptedParentError: If the forest is broken
        """
        root, path = self._locate(element)
        self._compress(root, path)
        return root

    def join(self, x: N, y: N) -> None:
        """
        Merge the sets containing x and y.

        The root of lower rank is attached under the other one. On a tie, x's root
        becomes the parent and its rank grows by one. Nothing happens when x and y
        are already in the same set.

        Raises:
            NoSuchElementError: If x or y was never added
        """
        x_root = self.find(x)
        y_root = self.find(y)
        if x_root == y_root:
            return
        if self._rank[x_root] < self._rank[y_root]:
            x_root, y_root = y_root, x_root
        elif self._rank[x_root] == self._rank[y_root]:
            self._rank[x_root] += 1
        self._parent[y_root] = x_root
        self._members[x_root].update(self._members.pop(y_root))
        logger.debug(f"Joined set of '{y_root}' into set of '{x_root}'")

    def same_set(self, x: N, y: N) -> bool:
        """Check whether x and y belong to the same set."""
        return self.find(x) == self.find(y)

    def sets(self) -> List[Set[N]]:
        """Get a copy of every set, one per root."""
        return [set(members) for members in self._members.values()]

    def set(self, element: N) -> Set[N]:
        """
        Get the member set of an element's set.

        This is the internal set, not a copy: it reflects later additions to the
        same set, and may stop being updated once its root is merged under another
        one. Do not modify it and do not keep it across join() or add() calls.

        Raises:
            NoSuchElementError: If element was never added
            CorruptedParentError: If the root has no member set
        """
        root = self.find(element)
        try:
            return self._members[root]
        except KeyError as exc:
            logger.error(f"Root '{root}' has no member set")
            raise CorruptedParentError(root) from exc

    def set_count(self) -> int:
        """Get the number of disjoint sets."""
        return len(self._members)

    def __str__(self) -> str:
        return "\n".join(f"{element} -> {self.find(element)}" for element in list(self._parent))
