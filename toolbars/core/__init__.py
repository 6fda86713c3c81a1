"""
Editor Toolbars - Core Module

Shared configuration constants.
"""
