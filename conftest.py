pytest_plugins = ["session_assertions.pytest_plugin"]
