"""Testing – fakes for exercising pipelines in unit tests."""
