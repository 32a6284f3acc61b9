"""Unit tests for autosymlink.api.config.expand_path and expand_link modules."""

import pytest

from autosymlink.api.alias.AliasError import InvalidSyntaxError, UnknownVariableError
from autosymlink.api.alias.Aliases import Aliases
from autosymlink.api.config.ConfigError import HomeNotSetError
from autosymlink.api.config.expand_link import expand_link
from autosymlink.api.config.expand_path import expand_path
from autosymlink.api.config.ExpandedLink import ExpandedLink
from autosymlink.api.config.LinkConfig import LinkConfig


@pytest.fixture
def aliases() -> Aliases:
    namespace = Aliases(environ={"HOME": "/home/u", "USER": "u"}, hostname="box")
    namespace.update({"dotfiles": "${_home}/.dotfiles", "tilde": "~/t"})
    namespace.resolve_all()
    return namespace


class TestExpandPath:
    """Test expand_path function."""

    def test_interpolates_then_expands_tilde(self, aliases):
        assert expand_path("${dotfiles}/bashrc", aliases) == "/home/u/.dotfiles/bashrc"
        assert expand_path("~/.bashrc", aliases) == "/home/u/.bashrc"

    def test_tilde_produced_by_alias_is_expanded(self, aliases):
        assert expand_path("${tilde}/x", aliases) == "/home/u/t/x"

    def test_empty_stays_empty(self, aliases):
        assert expand_path("", aliases) == ""

    @pytest.mark.parametrize("path", ["/etc/hosts", "/home/u/.dotfiles/bashrc", "/a/$b/c"])
    def test_idempotent_on_absolute_paths(self, aliases, path):
        once = expand_path(path, aliases)
        assert once == path
        assert expand_path(once, aliases) == once

    def test_idempotent_after_expansion(self, aliases):
        once = expand_path("${dotfiles}/vimrc", aliases)
        assert expand_path(once, aliases) == once

    def test_errors_propagate(self, aliases):
        with pytest.raises(UnknownVariableError):
            expand_path("${nope}/x", aliases)
        with pytest.raises(InvalidSyntaxError):
            expand_path("${dotfiles", aliases)

    def test_home_not_set(self):
        with pytest.raises(HomeNotSetError):
            expand_path("~/x", Aliases(environ={}, hostname="box"))


class TestExpandLink:
    """Test expand_link function."""

    def test_end_to_end_expansion(self):
        namespace = Aliases(environ={"HOME": "/home/u"}, hostname="box")
        namespace.set("dotfiles", "${_home}/.dotfiles")
        namespace.resolve_all()
        link = LinkConfig(source="${dotfiles}/bashrc", destination="~/.bashrc")

        assert expand_link(link, namespace) == ExpandedLink(
            source="/home/u/.dotfiles/bashrc",
            destination="/home/u/.bashrc",
            force=False,
        )

    def test_force_carried(self, aliases):
        link = LinkConfig(source="/a", destination="/b", force=True)
        assert expand_link(link, aliases).force is True

    def test_empty_expansion_rejected(self, aliases):
        aliases.set("empty", "")
        with pytest.raises(ValueError, match="empty path"):
            expand_link(LinkConfig(source="${empty}", destination="/b"), aliases)
        with pytest.raises(ValueError, match="destination"):
            expand_link(LinkConfig(source="/a", destination="${empty}"), aliases)
