from unittest.mock import patch

from django.test import Client, TestCase
from django.utils.safestring import mark_safe

GRID = mark_safe('<div class="yug-grid"></div>')


class TestUploadsViews(TestCase):
    def setUp(self):
        self.client = Client()

    @patch("youtube_uploads.views.default.render_uploads", return_value=GRID)
    def test_grid_fragment(self, mock_render):
        response = self.client.get("/youtube-uploads/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response["Content-Type"], "text/html")
        self.assertEqual(response.content.decode(), str(GRID))
        mock_render.assert_called_once_with(channel=None)

    @patch("youtube_uploads.views.default.render_uploads", return_value=GRID)
    def test_grid_fragment_channel_override(self, mock_render):
        self.client.get("/youtube-uploads/?channel=%40SomeHandle")

        mock_render.assert_called_once_with(channel="@SomeHandle")

    def test_grid_fragment_rejects_post(self):
        response = self.client.post("/youtube-uploads/")

        self.assertEqual(response.status_code, 405)

    @patch("youtube_uploads.shortcodes.render_uploads", return_value=GRID)
    def test_page_expands_shortcode(self, mock_render):
        response = self.client.get("/?channel=%40PageHandle")

        self.assertEqual(response.status_code, 200)
        content = response.content.decode()
        self.assertIn(str(GRID), content)
        self.assertIn("@PageHandle", content)
        self.assertNotIn("[youtube_uploads", content)
        mock_render.assert_called_once_with(channel="@PageHandle")

    @patch("youtube_uploads.shortcodes.render_uploads", return_value=GRID)
    def test_page_uses_saved_channel(self, mock_render):
        response = self.client.get("/")

        self.assertEqual(response.status_code, 200)
        self.assertIn("UCuAXFkgsw1L7xaCfnd5JJOw", response.content.decode())
        mock_render.assert_called_once_with(channel=None)

    @patch("youtube_uploads.shortcodes.render_uploads", return_value=GRID)
    def test_page_channel_cannot_break_out_of_shortcode(self, mock_render):
        response = self.client.get("/", {"channel": '@Page"]Handle'})

        self.assertEqual(response.status_code, 200)
        content = response.content.decode()
        self.assertIn("@PageHandle", content)
        self.assertNotIn("[youtube_uploads", content)
        self.assertNotIn('"]', content)
        mock_render.assert_called_once_with(channel="@PageHandle")

    @patch("youtube_uploads.shortcodes.render_uploads", return_value=GRID)
    def test_page_channel_of_only_brackets_uses_saved_channel(self, mock_render):
        response = self.client.get("/", {"channel": '"]'})

        self.assertEqual(response.status_code, 200)
        self.assertIn("UCuAXFkgsw1L7xaCfnd5JJOw", response.content.decode())
        mock_render.assert_called_once_with(channel=None)
