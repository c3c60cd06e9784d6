from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    def __init__(self):
        self.items: List[T] = []

    def is_empty(self) -> bool:
        return len(self.items) == 0

    def push(self, item: T) -> None:
        self.items.append(item)

    def pop(self) -> Optional[T]:
        if not self.is_empty():
            return self.items.pop()
        return None

    def peek(self) -> Optional[T]:
        if not self.is_empty():
            return self.items[-1]
        return None

    def size(self) -> int:
        return len(self.items)

    def __len__(self):
        return self.size()
