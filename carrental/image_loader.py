"""Downloading of car images from their URLs."""

from __future__ import annotations

import threading
from typing import Any, Callable, Sequence

import httpx

ImageSink = Callable[[bytes], Any]
ProgressCallback = Callable[[int, int], Any]


def _download(client: httpx.Client, url: str) -> bytes | None:
    try:
        response = client.get(url)
    except httpx.HTTPError:
        return None
    if response.is_error:
        return None
    return response.content


class SingleUrlImageLoader:
    """Downloads one image at a time."""

    def __init__(self, client: httpx.Client | None = None) -> None:
        self.client = client if client is not None else httpx.Client()

    def load(self, url: str) -> bytes | None:
        """Return the image bytes, or None when the download failed."""
        return _download(self.client, url)


class ImageBatchLoader:
    """Downloads a batch of images, feeding each to its sink and reporting progress.

    When the number of finished downloads reaches the target count, the call
    that finished the batch returns the sinks of the whole batch.
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> None:
        self.client = client if client is not None else httpx.Client()
        self.on_progress = on_progress
        self.total = 0
        self.loaded = 0
        self._sinks: list[ImageSink | None] = []
        self._lock = threading.Lock()

    def set_target_count(self, count: int) -> None:
        """Set how many downloads make up the batch."""
        self.total = count
        if self.on_progress is not None:
            self.on_progress(self.loaded, self.total)

    def _finish(self, sink: ImageSink, data: bytes | None, index: int | None) -> list | None:
        if data is not None:
            sink(data)
        with self._lock:
            self.loaded += 1
            if index is None:
                self._sinks.append(sink)
            else:
                self._sinks[index] = sink
            loaded = self.loaded
            if self.on_progress is not None:
                self.on_progress(loaded, self.total)
            if loaded == self.total:
                return list(self._sinks)
        return None

    def load_image(self, url: str, sink: ImageSink) -> list | None:
        """Download one image; return all sinks if this completed the batch."""
        return self._finish(sink, _download(self.client, url), None)

    def load_images_in_order(
        self, urls: Sequence[str], sinks: Sequence[ImageSink]
    ) -> list | None:
        """Download ``urls`` into matching ``sinks``; return sinks in URL order once complete."""
        if len(urls) != len(sinks):
            raise ValueError("urls and sinks must have the same length")
        with self._lock:
            self._sinks = [None] * len(urls)
        result = None
        for index, (url, sink) in enumerate(zip(urls, sinks)):
            done = self._finish(sink, _download(self.client, url), index)
            if done is not None:
                result = done
        return result