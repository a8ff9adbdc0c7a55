pytest_plugins = ["lakeview.testing.conftest"]
