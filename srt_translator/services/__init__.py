"""Subtitle parsing, translation and pipeline services."""
