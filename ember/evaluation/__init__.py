"""Evaluation of Ember syntax trees."""
