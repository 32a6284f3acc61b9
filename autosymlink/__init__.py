"""autosymlink - declarative symlink manager driven by a JSON config file."""
