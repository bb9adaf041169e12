"""cmdslack: run configured local commands from Slack slash commands."""

__version__ = "0.1.0"
