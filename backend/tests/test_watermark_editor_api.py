"""
Test watermark editor, style preset and template style APIs
The editing session sends its current list; every call returns the next list
"""
import json
from io import BytesIO

from PIL import Image


class TestWatermarkEditor:
    """Add/remove/update/toggle over the session's list"""

    def test_add_to_empty_list(self, client, admin_headers):
        response = client.post("/api/admin/watermarks/add", json={"watermarks": []}, headers=admin_headers)
        assert response.status_code == 200
        data = response.json()
        assert len(data["watermarks"]) == 1
        assert data["advisory"] is None
        assert data["can_add"] is True
        assert data["can_remove"] is False

    def test_add_at_capacity_returns_advisory(self, client, admin_headers, make_watermark):
        watermarks = [make_watermark(f"w{i}") for i in range(6)]
        response = client.post("/api/admin/watermarks/add", json={"watermarks": watermarks}, headers=admin_headers)

        assert response.status_code == 200
        data = response.json()
        assert len(data["watermarks"]) == 6
        assert data["advisory"]
        assert data["can_add"] is False

    def test_add_with_text(self, client, admin_headers, make_watermark):
        response = client.post("/api/admin/watermarks/add", json={
            "watermarks": [make_watermark("w1")], "text": "© Studio"
        }, headers=admin_headers)
        data = response.json()
        assert data["watermarks"][-1]["text"] == "© Studio"
        assert data["can_remove"] is True

    def test_remove(self, client, admin_headers, make_watermark):
        watermarks = [make_watermark("w1"), make_watermark("w2"), make_watermark("w3")]
        response = client.post("/api/admin/watermarks/w2/remove", json={"watermarks": watermarks},
                               headers=admin_headers)
        assert response.status_code == 200
        assert [w["id"] for w in response.json()["watermarks"]] == ["w1", "w3"]

    def test_remove_last_watermark_rejected(self, client, admin_headers, make_watermark):
        response = client.post("/api/admin/watermarks/w1/remove", json={"watermarks": [make_watermark("w1")]},
                               headers=admin_headers)
        assert response.status_code == 400

    def test_remove_unknown_id(self, client, admin_headers, make_watermark):
        watermarks = [make_watermark("w1"), make_watermark("w2")]
        response = client.post("/api/admin/watermarks/nope/remove", json={"watermarks": watermarks},
                               headers=admin_headers)
        assert response.status_code == 404

    def test_update(self, client, admin_headers, make_watermark):
        watermarks = [make_watermark("w1"), make_watermark("w2")]
        response = client.patch("/api/admin/watermarks/w2", json={
            "watermarks": watermarks,
            "patch": {"text": "Updated", "opacity": 0.9, "id": "ignored"}
        }, headers=admin_headers)

        assert response.status_code == 200
        result = response.json()["watermarks"]
        assert result[0]["text"] == watermarks[0]["text"]
        assert result[1]["id"] == "w2"
        assert result[1]["text"] == "Updated"
        assert result[1]["opacity"] == 0.9

    def test_update_to_empty_text_rejected(self, client, admin_headers, make_watermark):
        response = client.patch("/api/admin/watermarks/w1", json={
            "watermarks": [make_watermark("w1")],
            "patch": {"text": ""}
        }, headers=admin_headers)
        assert response.status_code == 400

    def test_switch_to_logo_needs_url(self, client, admin_headers, make_watermark):
        response = client.patch("/api/admin/watermarks/w1", json={
            "watermarks": [make_watermark("w1")],
            "patch": {"type": "logo"}
        }, headers=admin_headers)
        assert response.status_code == 400

        response = client.patch("/api/admin/watermarks/w1", json={
            "watermarks": [make_watermark("w1")],
            "patch": {"type": "logo", "logo_url": "https://cdn.example.com/logo.png"}
        }, headers=admin_headers)
        assert response.status_code == 200

    def test_invalid_patch_values(self, client, admin_headers, make_watermark):
        response = client.patch("/api/admin/watermarks/w1", json={
            "watermarks": [make_watermark("w1")],
            "patch": {"opacity": 1.5}
        }, headers=admin_headers)
        assert response.status_code == 422

    def test_toggle(self, client, admin_headers, make_watermark):
        watermarks = [make_watermark("w1"), make_watermark("w2")]
        response = client.post("/api/admin/watermarks/w1/toggle", json={"watermarks": watermarks},
                               headers=admin_headers)
        result = response.json()["watermarks"]
        assert result[0]["enabled"] is False
        assert result[1]["enabled"] is True

    def test_duplicate_ids_rejected(self, client, admin_headers, make_watermark):
        response = client.post("/api/admin/watermarks/add", json={
            "watermarks": [make_watermark("w1"), make_watermark("w1")]
        }, headers=admin_headers)
        assert response.status_code == 422


class TestWatermarkPreview:
    """Render parameters and server-side rendering"""

    def test_preview_all_disabled(self, client, admin_headers, make_watermark):
        response = client.post("/api/admin/watermarks/preview", json={
            "watermarks": [make_watermark("w1", enabled=False)],
            "style_preset": {"preset": "bogus"}
        }, headers=admin_headers)
        assert response.json() == {"render": {"state": "none", "overlays": []}, "css_filter": "none"}

    def test_preview_with_preset(self, client, admin_headers, make_watermark):
        response = client.post("/api/admin/watermarks/preview", json={
            "watermarks": [make_watermark("w1", position="center")],
            "style_preset": {"preset": "film-portrait"}
        }, headers=admin_headers)
        data = response.json()
        assert data["render"]["state"] == "watermarked"
        assert data["render"]["overlays"][0]["anchor_x"] == 0.5
        assert "contrast(1.1)" in data["css_filter"]

    def test_render_image(self, client, admin_headers, make_watermark, test_image_factory):
        response = client.post(
            "/api/admin/watermarks/render",
            files={"file": ("photo.jpg", test_image_factory(size=(300, 200)), "image/jpeg")},
            data={"watermarks": json.dumps([make_watermark("w1")]), "preset": "black-white"},
            headers=admin_headers
        )
        assert response.status_code == 200
        assert response.headers["content-type"] == "image/jpeg"
        with Image.open(BytesIO(response.content)) as img:
            assert img.size == (300, 200)

    def test_render_invalid_watermarks_json(self, client, admin_headers, test_image_factory):
        response = client.post(
            "/api/admin/watermarks/render",
            files={"file": ("photo.jpg", test_image_factory(), "image/jpeg")},
            data={"watermarks": "{not json"},
            headers=admin_headers
        )
        assert response.status_code == 400

    def test_render_invalid_image(self, client, admin_headers):
        response = client.post(
            "/api/admin/watermarks/render",
            files={"file": ("photo.jpg", BytesIO(b"not an image"), "image/jpeg")},
            headers=admin_headers
        )
        assert response.status_code == 400


class TestStylePresetsApi:
    def test_list_presets(self, client, admin_headers):
        response = client.get("/api/admin/style-presets", headers=admin_headers)
        assert response.status_code == 200
        assert len(response.json()) == 13

    def test_filter_by_category(self, client, admin_headers):
        response = client.get("/api/admin/style-presets?category=general", headers=admin_headers)
        assert {p["id"] for p in response.json()} == {"black-white", "vintage", "cool"}


class TestStyleTemplatesApi:
    def test_list_templates(self, client, admin_headers):
        response = client.get("/api/admin/style-templates", headers=admin_headers)
        assert response.status_code == 200
        assert [t["id"] for t in response.json()] == ["classic", "minimal-light", "film-dark", "wedding-gold"]

    def test_preview_switch_clears_light_class(self, client, admin_headers):
        response = client.post("/api/admin/style-templates/preview", json={
            "template_id": "classic",
            "previous_template_id": "minimal-light"
        }, headers=admin_headers)
        assert response.status_code == 200
        data = response.json()
        assert "light" not in data["style_state"]["classes"]
        assert data["style_state"]["dataset"]["template"] == "classic"
        assert data["patch"]["template_id"] == "classic"

    def test_preview_on_stored_base_style(self, client, admin_headers, fake_db):
        fake_db.site_config.docs.append({"type": "base_style", "classes": ["site"], "body_background": "#123456"})
        data = client.post("/api/admin/style-templates/preview", json={"template_id": "wedding-gold"},
                           headers=admin_headers).json()
        assert data["style_state"]["classes"] == ["site", "light"]
        assert data["patch"]["body_background"] == "#123456"

    def test_preview_unknown_template(self, client, admin_headers):
        response = client.post("/api/admin/style-templates/preview", json={"template_id": "baroque"},
                               headers=admin_headers)
        assert response.status_code == 400
