"""Marketplace notification and delivery pipeline.

Reacts to document lifecycle events, fans out in-app notifications and
delivers subscription confirmation emails through a chain of channels.
"""
