"""API endpoint tests."""


def create_wishlist(client, headers, **fields):
    payload = {"name": "Birthday", **fields}
    response = client.post("/api/v1/wishlists", headers=headers, json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def create_item(client, headers, wishlist_id, **fields):
    payload = {"title": "Headphones", "url": "https://example.com/headphones", **fields}
    response = client.post(f"/api/v1/wishlists/{wishlist_id}/items", headers=headers, json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_register_user(client):
    """Test user registration."""
    response = client.post(
        "/api/v1/auth/register",
        json={"email": "newuser@example.com", "password": "password123", "name": "New User"},
    )
    assert response.status_code == 201
    assert "access_token" in response.json()


def test_register_duplicate_email(client, auth_headers):
    """Test registration with duplicate email fails."""
    response = client.post(
        "/api/v1/auth/register",
        json={"email": auth_headers.email, "password": "password123", "name": "Duplicate"},
    )
    assert response.status_code == 400
    assert "already registered" in response.json()["detail"]


def test_register_duplicate_username(client, auth_headers):
    """Test registration with a taken username fails."""
    response = client.post(
        "/api/v1/auth/register",
        json={"email": "other@example.com", "password": "password123", "username": "owner"},
    )
    assert response.status_code == 400
    assert "taken" in response.json()["detail"]


def test_login(client, auth_headers):
    """Test user login."""
    response = client.post(
        "/api/v1/auth/login", json={"email": auth_headers.email, "password": "testpass123"}
    )
    assert response.status_code == 200
    assert "access_token" in response.json()


def test_login_wrong_password(client, auth_headers):
    """Test login with wrong password."""
    response = client.post(
        "/api/v1/auth/login", json={"email": auth_headers.email, "password": "wrongpass"}
    )
    assert response.status_code == 401


def test_get_current_user(client, auth_headers):
    """Test getting current user info."""
    response = client.get("/api/v1/auth/me", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["email"] == auth_headers.email
    assert response.json()["username"] == "owner"


def test_update_profile(client, auth_headers, friend_headers):
    """Test editing the current user's profile."""
    response = client.put(
        "/api/v1/auth/me",
        headers=auth_headers,
        json={"bio": "Gift enthusiast", "username": "wisher"},
    )
    assert response.status_code == 200
    assert response.json()["bio"] == "Gift enthusiast"
    assert response.json()["username"] == "wisher"

    response = client.put("/api/v1/auth/me", headers=friend_headers, json={"username": "wisher"})
    assert response.status_code == 409


def test_invalid_token(client):
    """Test that a garbage token is rejected."""
    response = client.get("/api/v1/wishlists", headers={"Authorization": "Bearer nope"})
    assert response.status_code == 401


def test_missing_token(client):
    """Test that authenticated endpoints need credentials."""
    response = client.get("/api/v1/wishlists")
    assert response.status_code in (401, 403)


def test_default_wishlist_created_on_first_read(client, auth_headers):
    """Test that listing wishlists creates the default one."""
    response = client.get("/api/v1/wishlists", headers=auth_headers)
    assert response.status_code == 200
    wishlists = response.json()
    assert len(wishlists) == 1
    assert wishlists[0]["name"] == "My Wishlist"
    assert wishlists[0]["is_default"] is True

    again = client.get("/api/v1/wishlists", headers=auth_headers).json()
    assert [w["id"] for w in again] == [wishlists[0]["id"]]


def test_create_wishlist(client, auth_headers):
    """Test creating a wishlist."""
    wishlist = create_wishlist(client, auth_headers, description="Ideas", privacy="private")

    assert wishlist["name"] == "Birthday"
    assert wishlist["privacy"] == "private"
    assert wishlist["share_link"]
    assert wishlist["icon"]
    assert wishlist["user_id"] == auth_headers.user_id


def test_create_wishlist_blank_name(client, auth_headers):
    """Test that a blank name is rejected."""
    response = client.post("/api/v1/wishlists", headers=auth_headers, json={"name": "   "})
    assert response.status_code == 422


def test_update_and_delete_wishlist(client, auth_headers, friend_headers):
    """Test owner-only update and delete."""
    wishlist = create_wishlist(client, auth_headers)
    url = f"/api/v1/wishlists/{wishlist['id']}"

    response = client.put(url, headers=friend_headers, json={"name": "Mine now"})
    assert response.status_code == 403
    assert response.json()["detail"].startswith("Unauthorized")

    response = client.put(url, headers=auth_headers, json={"name": "Renamed"})
    assert response.status_code == 200
    assert response.json()["name"] == "Renamed"

    response = client.delete(url, headers=auth_headers)
    assert response.status_code == 204
    assert client.get(url, headers=auth_headers).status_code == 404


def test_share_link_privacy(client, auth_headers, friend_headers):
    """Test that share links obey the same privacy rules as ids."""
    public = create_wishlist(client, auth_headers, name="Public")
    private = create_wishlist(client, auth_headers, name="Private", privacy="private")
    personal = create_wishlist(client, auth_headers, name="Personal", privacy="personal")

    def share(wishlist, headers=None):
        return client.get(f"/api/v1/wishlists/share/{wishlist['share_link']}", headers=headers)

    assert share(public).status_code == 200
    assert share(private).status_code == 401
    assert share(private, friend_headers).status_code == 200
    assert share(personal, friend_headers).status_code == 403
    assert share(personal, auth_headers).status_code == 200
    assert client.get("/api/v1/wishlists/share/NoSuchLink").status_code == 404


def test_profile_wishlists(client, auth_headers, friend_headers):
    """Test the profile listing for owners, strangers and friends."""
    create_wishlist(client, auth_headers, name="Public")
    create_wishlist(client, auth_headers, name="Private", privacy="private")
    create_wishlist(client, auth_headers, name="Personal", privacy="personal")

    def names(headers=None):
        response = client.get("/api/v1/users/owner/wishlists", headers=headers)
        assert response.status_code == 200
        return {w["name"] for w in response.json()}

    assert names(auth_headers) == {"Public", "Private", "Personal"}
    assert names() == {"Public"}
    assert names(friend_headers) == {"Public"}

    request_id = client.post(
        "/api/v1/friends", json={"username": "owner"}, headers=friend_headers
    ).json()["id"]
    client.post(f"/api/v1/friends/{request_id}/accept", headers=auth_headers)

    assert names(friend_headers) == {"Public", "Private"}
    assert client.get("/api/v1/users/nobody/wishlists").status_code == 404


def test_item_crud(client, auth_headers, friend_headers):
    """Test adding, reading, updating and deleting items."""
    wishlist = create_wishlist(client, auth_headers)
    item = create_item(client, auth_headers, wishlist["id"], price="$50", priority=1)

    assert item["claim_status"] == "none"
    assert [entry["price"] for entry in item["price_history"]] == ["$50"]

    response = client.post(
        f"/api/v1/wishlists/{wishlist['id']}/items",
        headers=friend_headers,
        json={"title": "Sneaky", "url": "https://example.com/x"},
    )
    assert response.status_code == 403

    response = client.put(
        f"/api/v1/items/{item['id']}", headers=auth_headers, json={"price": "$45"}
    )
    assert response.status_code == 200
    assert [entry["price"] for entry in response.json()["price_history"]] == ["$50", "$45"]

    response = client.get(f"/api/v1/wishlists/{wishlist['id']}/items")
    assert [i["id"] for i in response.json()] == [item["id"]]

    response = client.delete(f"/api/v1/items/{item['id']}", headers=auth_headers)
    assert response.status_code == 204
    assert client.get(f"/api/v1/items/{item['id']}").status_code == 404


def test_item_requires_url(client, auth_headers):
    """Test that items need a source URL."""
    wishlist = create_wishlist(client, auth_headers)
    response = client.post(
        f"/api/v1/wishlists/{wishlist['id']}/items", headers=auth_headers, json={"title": "No link"}
    )
    assert response.status_code == 422


def test_clear_optional_item_fields(client, auth_headers):
    """Test that explicit nulls clear nullable item fields."""
    wishlist = create_wishlist(client, auth_headers)
    item = create_item(
        client,
        auth_headers,
        wishlist["id"],
        affiliate_url="https://aff.test",
        notes="Blue please",
        tags=["audio"],
    )
    url = f"/api/v1/items/{item['id']}"

    response = client.put(
        url, headers=auth_headers, json={"affiliate_url": None, "notes": None, "tags": None}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["affiliate_url"] is None
    assert data["notes"] is None
    assert data["tags"] is None
    assert data["title"] == "Headphones"


def test_item_title_cannot_be_cleared(client, auth_headers):
    """Test that a null title is rejected and leaves the item unchanged."""
    wishlist = create_wishlist(client, auth_headers)
    item = create_item(client, auth_headers, wishlist["id"])
    url = f"/api/v1/items/{item['id']}"

    response = client.put(url, headers=auth_headers, json={"title": None})
    assert response.status_code == 400
    assert "title" in response.json()["detail"]

    assert client.get(url).json()["title"] == "Headphones"


def test_wishlist_nulls(client, auth_headers):
    """Test that a description can be cleared but a name cannot."""
    wishlist = create_wishlist(client, auth_headers, description="Ideas")
    url = f"/api/v1/wishlists/{wishlist['id']}"

    response = client.put(url, headers=auth_headers, json={"description": None})
    assert response.status_code == 200
    assert response.json()["description"] is None

    response = client.put(url, headers=auth_headers, json={"name": None})
    assert response.status_code == 400
    assert client.get(url, headers=auth_headers).json()["name"] == "Birthday"


def test_reorder_items(client, auth_headers):
    """Test setting the display order."""
    wishlist = create_wishlist(client, auth_headers)
    first = create_item(client, auth_headers, wishlist["id"], title="First")
    second = create_item(client, auth_headers, wishlist["id"], title="Second")

    response = client.post(
        f"/api/v1/wishlists/{wishlist['id']}/items/reorder",
        headers=auth_headers,
        json={"item_ids": [second["id"], first["id"]]},
    )

    assert response.status_code == 200
    assert [i["id"] for i in response.json()] == [second["id"], first["id"]]


def test_personal_items_hidden(client, auth_headers, friend_headers):
    """Test that items on a personal list are hidden from others."""
    wishlist = create_wishlist(client, auth_headers, privacy="personal")
    item = create_item(client, auth_headers, wishlist["id"])

    assert client.get(f"/api/v1/items/{item['id']}", headers=friend_headers).status_code == 403
    assert client.get(f"/api/v1/wishlists/{wishlist['id']}/items").status_code == 403
    assert client.get(f"/api/v1/items/{item['id']}", headers=auth_headers).status_code == 200


class TestClaimAPI:
    """Tests for the claim endpoints."""

    def test_claim_confirm_flow(self, client, auth_headers, friend_headers):
        wishlist = create_wishlist(client, auth_headers)
        item = create_item(client, auth_headers, wishlist["id"])
        base = f"/api/v1/items/{item['id']}"

        response = client.post(f"{base}/claim", headers=friend_headers)
        assert response.status_code == 200
        assert response.json()["claim_status"] == "pending"

        response = client.post(f"{base}/claim", headers=friend_headers)
        assert response.status_code == 409

        response = client.post(f"{base}/confirm", headers=friend_headers, json={"confirm": True})
        assert response.status_code == 403

        response = client.post(f"{base}/confirm", headers=auth_headers, json={"confirm": True})
        assert response.status_code == 200
        assert response.json()["claim_status"] == "confirmed"
        assert response.json()["purchased_by"] == friend_headers.user_id

    def test_purchase_proof_flow(self, client, auth_headers, friend_headers):
        wishlist = create_wishlist(client, auth_headers)
        item = create_item(client, auth_headers, wishlist["id"])
        base = f"/api/v1/items/{item['id']}"
        client.post(f"{base}/claim", headers=friend_headers)

        response = client.post(
            f"{base}/mark-purchased",
            headers=friend_headers,
            json={"purchase_proof": "https://example.com/receipt.png", "tracking_number": "1Z"},
        )
        assert response.status_code == 200
        assert response.json()["claim_status"] == "purchased"

        response = client.post(
            f"{base}/verify-proof", headers=friend_headers, json={"verified": True}
        )
        assert response.status_code == 403

        response = client.post(
            f"{base}/verify-proof", headers=auth_headers, json={"verified": True}
        )
        assert response.status_code == 200
        assert response.json()["proof_verified"] is True
        assert response.json()["claim_status"] == "confirmed"

    def test_unclaim_permissions(self, client, auth_headers, friend_headers, stranger_headers):
        wishlist = create_wishlist(client, auth_headers)
        item = create_item(client, auth_headers, wishlist["id"])
        base = f"/api/v1/items/{item['id']}"
        client.post(f"{base}/claim", headers=friend_headers)

        assert client.post(f"{base}/unclaim", headers=stranger_headers).status_code == 403

        response = client.post(f"{base}/unclaim", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["claim_status"] == "none"

    def test_claim_needs_visibility(self, client, auth_headers, friend_headers):
        wishlist = create_wishlist(client, auth_headers, privacy="personal")
        item = create_item(client, auth_headers, wishlist["id"])

        response = client.post(f"/api/v1/items/{item['id']}/claim", headers=friend_headers)

        assert response.status_code == 403

    def test_direct_purchase_and_unpurchase(self, client, auth_headers, friend_headers):
        wishlist = create_wishlist(client, auth_headers)
        item = create_item(client, auth_headers, wishlist["id"])
        base = f"/api/v1/items/{item['id']}"

        response = client.post(f"{base}/purchase", headers=friend_headers)
        assert response.json()["is_purchased"] is True

        assert client.post(f"{base}/unpurchase", headers=friend_headers).status_code == 403

        response = client.post(f"{base}/unpurchase", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["is_purchased"] is False


def test_browse_users(client, auth_headers, friend_headers, stranger_headers):
    """Test listing users with public wishlists."""
    create_wishlist(client, auth_headers, name="Public")
    create_wishlist(client, friend_headers, name="Hidden", privacy="personal")

    response = client.get("/api/v1/users/browse")
    assert response.status_code == 200
    assert [u["username"] for u in response.json()] == ["owner"]
    assert "email" not in response.json()[0]

    response = client.get("/api/v1/users/browse", headers=auth_headers)
    assert response.json() == []


def test_check_friend(client, auth_headers, friend_headers, stranger_headers):
    """Test the friendship check on profile pages."""

    def is_friend(username, headers=None):
        response = client.get(f"/api/v1/users/{username}/check-friend", headers=headers)
        assert response.status_code == 200
        return response.json()["is_friend"]

    request_id = client.post(
        "/api/v1/friends", json={"username": "owner"}, headers=friend_headers
    ).json()["id"]
    assert is_friend("owner", friend_headers) is False

    client.post(f"/api/v1/friends/{request_id}/accept", headers=auth_headers)

    assert is_friend("owner", friend_headers) is True
    assert is_friend("friend", auth_headers) is True
    assert is_friend(auth_headers.user_id, friend_headers) is True
    assert is_friend("owner", stranger_headers) is False
    assert is_friend("owner") is False
    assert is_friend("nobody", friend_headers) is False


def test_username_takes_precedence_over_id(client, auth_headers, friend_headers):
    """Test that a username shaped like another user's id resolves to its owner."""
    response = client.put(
        "/api/v1/auth/me", headers=friend_headers, json={"username": auth_headers.user_id}
    )
    assert response.status_code == 200
    create_wishlist(client, auth_headers, name="Owner list")
    create_wishlist(client, friend_headers, name="Friend list")

    response = client.get(f"/api/v1/users/{auth_headers.user_id}/wishlists")

    assert response.status_code == 200
    assert [w["name"] for w in response.json()] == ["Friend list"]
