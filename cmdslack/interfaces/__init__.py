"""Chat platform interfaces for cmdslack."""
