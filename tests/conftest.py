pytest_plugins = ["hooksig.testing.fixtures"]
