"""Near-end-of-list detection for infinite scroll."""


class ScrollManager:
    """Reports when the visible window gets close to the end of the content.

    Fires once per content length: after firing it stays quiet until the
    content grows or the user scrolls back out of the threshold zone.
    """

    def __init__(self, threshold: float = 0.1):
        if threshold <= 0:
            raise ValueError("threshold must be positive")
        self.threshold = threshold
        self._sent_for_length = None

    @staticmethod
    def distance_from_end(offset: float, viewport_length: float, content_length: float) -> float:
        return content_length - offset - viewport_length

    def on_scroll(self, offset: float, viewport_length: float, content_length: float) -> bool:
        if viewport_length <= 0 or content_length <= 0:
            return False

        distance = self.distance_from_end(offset, viewport_length, content_length)
        if distance >= self.threshold * viewport_length:
            self._sent_for_length = None
            return False

        if self._sent_for_length == content_length:
            return False

        self._sent_for_length = content_length
        return True

    def reset(self) -> None:
        self._sent_for_length = None
