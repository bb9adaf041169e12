"""Core command bridging logic, independent of the chat platform."""
