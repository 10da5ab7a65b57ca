"""Tests for wishlists, share links and the privacy gate."""

import re

import pytest

from src.models.enums import FriendshipStatus, Privacy
from src.models.friendship import Friendship
from src.models.item import WishlistItem
from src.models.wishlist import Wishlist
from src.services.errors import (
    AuthenticationRequiredError,
    InvalidInputError,
    NotFoundError,
    UnauthorizedError,
)
from src.services.icons import COLORS, ICONS, random_icon_and_color
from src.services.privacy import can_view, ensure_can_view
from src.services.share_link import generate_share_link, generate_unique_share_link
from src.services.wishlist_service import WishlistService


@pytest.fixture
def service(db):
    return WishlistService(db)


def befriend(db, user_a, user_b):
    db.add(
        Friendship(
            user_id=user_a.id, friend_id=user_b.id, status=FriendshipStatus.ACCEPTED.value
        )
    )
    db.commit()


class TestShareLinks:
    """Tests for share link generation."""

    def test_link_is_three_capitalized_words(self):
        assert re.fullmatch(r"([A-Z][a-z]+){3}", generate_share_link())

    def test_unique_link_skips_taken_ones(self):
        taken = set()

        def exists(link):
            # First candidate is always reported as taken
            if not taken:
                taken.add(link)
                return True
            return link in taken

        link = generate_unique_share_link(exists)

        assert link not in taken

    def test_falls_back_to_numeric_suffix(self):
        attempts = []

        def always_taken(link):
            attempts.append(link)
            return True

        link = generate_unique_share_link(always_taken, max_attempts=5)

        assert len(attempts) == 5
        assert re.fullmatch(r"([A-Z][a-z]+){3}\d{1,3}", link)

    def test_random_icon_and_color(self):
        icon, color = random_icon_and_color()
        assert icon in ICONS
        assert color in COLORS


class TestPrivacyGate:
    """Tests for can_view / ensure_can_view."""

    @pytest.mark.parametrize(
        "privacy,viewer,expected",
        [
            (Privacy.PUBLIC, None, True),
            (Privacy.PUBLIC, "someone", True),
            (Privacy.PUBLIC, "owner", True),
            (Privacy.PRIVATE, None, False),
            (Privacy.PRIVATE, "someone", True),
            (Privacy.PRIVATE, "owner", True),
            (Privacy.PERSONAL, None, False),
            (Privacy.PERSONAL, "someone", False),
            (Privacy.PERSONAL, "owner", True),
        ],
    )
    def test_can_view(self, privacy, viewer, expected):
        assert can_view(privacy.value, "owner", viewer) is expected

    def test_personal_raises_unauthorized(self):
        with pytest.raises(UnauthorizedError, match="personal"):
            ensure_can_view("personal", "owner", "someone")

    def test_private_asks_for_sign_in(self):
        with pytest.raises(AuthenticationRequiredError) as exc_info:
            ensure_can_view("private", "owner", None)
        assert exc_info.value.status_code == 401


class TestCreateWishlist:
    """Tests for wishlist creation."""

    def test_create_assigns_share_link_and_icon(self, service, owner):
        wishlist = service.create_wishlist(owner.id, name="Christmas", description="Ideas")

        assert wishlist.share_link
        assert wishlist.icon in ICONS
        assert wishlist.color in COLORS
        assert wishlist.privacy == Privacy.PUBLIC
        assert wishlist.is_default is False

    def test_explicit_icon_and_color_are_kept(self, service, owner):
        wishlist = service.create_wishlist(owner.id, name="Books", icon="📚", color="#123456")

        assert wishlist.icon == "📚"
        assert wishlist.color == "#123456"

    def test_unknown_user(self, service):
        with pytest.raises(NotFoundError):
            service.create_wishlist("missing-user", name="Nope")

    def test_share_links_are_unique(self, service, owner):
        links = {service.create_wishlist(owner.id, name=f"List {i}").share_link for i in range(10)}
        assert len(links) == 10

    def test_single_default(self, db, service, owner):
        first = service.create_wishlist(owner.id, name="First", is_default=True)
        second = service.create_wishlist(owner.id, name="Second", is_default=True)

        db.refresh(first)
        assert first.is_default is False
        assert second.is_default is True
        defaults = db.query(Wishlist).filter(
            Wishlist.user_id == owner.id, Wishlist.is_default.is_(True)
        )
        assert defaults.count() == 1

    def test_default_is_created_lazily(self, service, owner):
        default = service.get_default_wishlist(owner.id)

        assert default.name == "My Wishlist"
        assert default.is_default is True
        assert service.get_default_wishlist(owner.id).id == default.id

    def test_user_wishlists_default_first(self, service, owner):
        service.create_wishlist(owner.id, name="Other")
        default = service.get_default_wishlist(owner.id)
        service.create_wishlist(owner.id, name="Newest")

        assert service.get_user_wishlists(owner.id)[0].id == default.id


class TestUpdateWishlist:
    """Tests for updates and deletes."""

    def test_update_fields(self, service, wishlist, owner):
        updated = service.update_wishlist(
            wishlist.id, owner.id, {"name": "Renamed", "privacy": "private"}
        )

        assert updated.name == "Renamed"
        assert updated.privacy == Privacy.PRIVATE

    def test_making_default_unsets_previous(self, db, service, wishlist, owner):
        default = service.get_default_wishlist(owner.id)

        service.update_wishlist(wishlist.id, owner.id, {"is_default": True})

        db.refresh(default)
        assert default.is_default is False
        assert service.get_wishlist(wishlist.id).is_default is True

    def test_share_link_is_not_updatable(self, service, wishlist, owner):
        with pytest.raises(InvalidInputError):
            service.update_wishlist(wishlist.id, owner.id, {"share_link": "Mine"})

    def test_only_owner_updates(self, service, wishlist, buyer):
        with pytest.raises(UnauthorizedError):
            service.update_wishlist(wishlist.id, buyer.id, {"name": "Hijacked"})

    def test_delete_cascades_to_items(self, db, service, wishlist, item, owner):
        service.delete_wishlist(wishlist.id, owner.id)

        assert db.query(Wishlist).filter(Wishlist.id == wishlist.id).first() is None
        assert db.query(WishlistItem).filter(WishlistItem.id == item.id).first() is None

    def test_only_owner_deletes(self, service, wishlist, buyer):
        with pytest.raises(UnauthorizedError):
            service.delete_wishlist(wishlist.id, buyer.id)


class TestVisibility:
    """Tests for reading wishlists as other users."""

    @pytest.fixture
    def lists(self, service, owner):
        return {
            privacy: service.create_wishlist(owner.id, name=privacy.value, privacy=privacy)
            for privacy in Privacy
        }

    def test_owner_sees_everything(self, service, lists, owner):
        visible = service.list_visible_wishlists(owner.id, owner.id)
        assert len(visible) == 3

    def test_anonymous_sees_public_only(self, service, lists, owner):
        visible = service.list_visible_wishlists(owner.id, None)
        assert [w.id for w in visible] == [lists[Privacy.PUBLIC].id]

    def test_stranger_sees_public_only(self, service, lists, owner, buyer):
        visible = service.list_visible_wishlists(owner.id, buyer.id)
        assert [w.id for w in visible] == [lists[Privacy.PUBLIC].id]

    def test_friend_sees_private(self, db, service, lists, owner, buyer):
        befriend(db, buyer, owner)

        visible = {w.id for w in service.list_visible_wishlists(owner.id, buyer.id)}

        assert visible == {lists[Privacy.PUBLIC].id, lists[Privacy.PRIVATE].id}

    def test_share_link_applies_privacy(self, service, lists, owner, buyer):
        personal = lists[Privacy.PERSONAL]
        private = lists[Privacy.PRIVATE]

        with pytest.raises(UnauthorizedError):
            service.get_wishlist_by_share_link(personal.share_link, buyer.id)
        with pytest.raises(AuthenticationRequiredError):
            service.get_wishlist_by_share_link(private.share_link, None)

        found = service.get_wishlist_by_share_link(private.share_link, buyer.id)
        assert found.id == private.id
        assert service.get_wishlist_by_share_link(personal.share_link, owner.id).id == personal.id

    def test_unknown_share_link(self, service):
        with pytest.raises(NotFoundError):
            service.get_wishlist_by_share_link("NoSuchLink", None)

    def test_browse_lists_owners_of_public_lists(self, service, lists, owner, buyer):
        service.create_wishlist(buyer.id, name="Secret", privacy=Privacy.PERSONAL)

        assert [u.id for u in service.browse_public_owners(None)] == [owner.id]
        assert [u.id for u in service.browse_public_owners(buyer.id)] == [owner.id]
        assert service.browse_public_owners(owner.id) == []
