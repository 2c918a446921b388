"""Tally - personal task tracker."""
