# cmdslack/interfaces/slack/__init__.py
"""Slack integration package for cmdslack.

This package provides the Slack bot implementation using AsyncApp
and AsyncSocketModeHandler from slack-bolt.

Entry point: cmdslack run
"""
