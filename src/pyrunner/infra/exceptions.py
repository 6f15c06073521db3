class AssetLoadError(Exception):
    """Raised when an image asset is missing or cannot be decoded."""


class AudioUnavailableError(Exception):
    """Raised when the audio device cannot be initialised."""
