"""Download of the supplementary ``.spelling`` word list.

The word list is fetched once per run. Any failure (network error, non-2xx
status, destination already present) is reported as a ``FetchResult`` so the
caller can fall back to the word list bundled with the package.
"""

from dataclasses import dataclass
from pathlib import Path

import requests
from loguru import logger

FALLBACK_SPELLING_PATH = Path(__file__).parent / "data" / "fallback.spelling"


@dataclass(frozen=True)
class FetchResult:
    """Outcome of a single download attempt."""

    url: str
    destination: Path
    ok: bool
    status_code: int | None = None
    error: str | None = None


class SpellingFileFetcher:
    """Fetches a word list over HTTP into a new local file.

    A single GET is issued with an explicit timeout. There is no retry: a
    failed download is cheap to replace with the bundled fallback.

    Attributes:
        session: HTTP session used for the request
        timeout: Seconds to wait for the server before giving up
    """

    CHUNK_SIZE = 8192

    def __init__(self, session: requests.Session, timeout: float = 10.0):
        if timeout <= 0:
            msg = "timeout must be positive"
            logger.error(msg)
            raise ValueError(msg)

        self.session = session
        self.timeout = timeout

    def download(self, url: str, destination: str | Path) -> FetchResult:
        """Download ``url`` into ``destination``.

        The destination is created exclusively; an existing file is never
        overwritten and counts as a failed download. A partially written
        destination is removed on failure.

        Args:
            url: Location of the word list
            destination: Path of the file to create

        Returns:
            FetchResult describing the outcome
        """
        destination = Path(destination)

        if not url:
            return FetchResult(url, destination, ok=False, error="No spelling file URL configured")

        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            file = destination.open("xb")
        except OSError as e:
            logger.debug(f"Cannot create {destination}: {e}")
            return FetchResult(url, destination, ok=False, error=str(e))

        status_code = None
        error = None
        try:
            with file:
                logger.debug(f"Downloading spelling file from {url}")
                response = self.session.get(url, stream=True, timeout=self.timeout)
                status_code = response.status_code
                try:
                    if 200 <= status_code < 300:
                        for chunk in response.iter_content(chunk_size=self.CHUNK_SIZE):
                            if chunk:
                                file.write(chunk)
                    else:
                        error = f"Response {status_code}: {response.reason}"
                finally:
                    response.close()
        except (requests.RequestException, OSError) as e:
            error = str(e)

        if error is not None:
            self._discard(destination)
            return FetchResult(url, destination, ok=False, status_code=status_code, error=error)

        logger.debug(f"Wrote {destination.stat().st_size} bytes to {destination}")
        return FetchResult(url, destination, ok=True, status_code=status_code)

    def _discard(self, destination: Path) -> None:
        try:
            destination.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Failed to remove partial download {destination}: {e}")


def resolve_spelling_source(
    fetcher: SpellingFileFetcher,
    url: str,
    destination: str | Path,
    fallback: str | Path = FALLBACK_SPELLING_PATH,
) -> tuple[Path, FetchResult]:
    """Return the word list to use: the downloaded one, or ``fallback``.

    Returns:
        Tuple of (path to read words from, fetch outcome)
    """
    result = fetcher.download(url, destination)
    if result.ok:
        logger.info(f"Successfully downloaded .spelling file from {url}")
        return result.destination, result

    logger.warning(
        f"Can not download .spelling file from {url}. "
        f"Fallback .spelling will be used. Error: {result.error}"
    )
    return Path(fallback), result
