import os
import tempfile
import unittest
import unittest.mock

from PIL import Image

from impbadge import DisplayConfig, PushJobBuilder
from impbadge.rendering import ImageLoader


class TestDisplayConfig(unittest.TestCase):
    def test_defaults(self):
        config = DisplayConfig()
        self.assertEqual(config.canvas_size, (264, 176))
        self.assertEqual(config.bytes_per_row, 33)
        self.assertEqual(config.buffer_size, 5808)
        self.assertTrue(config.rotate)
        self.assertFalse(config.fit_to_canvas)
        self.assertFalse(config.invert)

    def test_row_bytes_round_up(self):
        self.assertEqual(DisplayConfig(width=10, height=2).buffer_size, 4)

    def test_validate_rejects_bad_size(self):
        with self.assertRaises(ValueError):
            DisplayConfig(width=0).validate()
        with self.assertRaises(ValueError):
            DisplayConfig(height=-1).validate()

    def test_validate_rejects_empty_url(self):
        with self.assertRaises(ValueError):
            DisplayConfig(agent_url="").validate()


class TestPushJobBuilder(unittest.TestCase):
    def setUp(self):
        self._tmpdir = tempfile.TemporaryDirectory()
        self.tmpdir = self._tmpdir.name

    def tearDown(self):
        self._tmpdir.cleanup()

    def _save(self, img, name="badge.png"):
        path = os.path.join(self.tmpdir, name)
        img.save(path)
        return path

    def test_white_canvas(self):
        path = self._save(Image.new("L", (264, 176), 255))
        data = PushJobBuilder().build_from_file(path)
        self.assertEqual(data, bytes(5808))

    def test_black_canvas(self):
        path = self._save(Image.new("L", (264, 176), 0))
        data = PushJobBuilder().build_from_file(path)
        self.assertEqual(data, b"\xff" * 5808)

    def test_synthetic_8x1(self):
        src = Image.new("L", (8, 1), 0)
        for x in range(4, 8):
            src.putpixel((x, 0), 255)
        path = self._save(src)
        builder = PushJobBuilder(DisplayConfig(width=8, height=1, rotate=False))
        self.assertEqual(builder.build_from_file(path), b"\xf0")

    def test_rotation_reverses_bits(self):
        src = Image.new("L", (8, 1), 0)
        for x in range(4, 8):
            src.putpixel((x, 0), 255)
        path = self._save(src)
        builder = PushJobBuilder(DisplayConfig(width=8, height=1))
        self.assertEqual(builder.build_from_file(path), b"\x0f")

    def test_fit_produces_full_buffer(self):
        path = self._save(Image.new("L", (50, 80), 0))
        builder = PushJobBuilder(DisplayConfig(fit_to_canvas=True))
        data = builder.build_from_file(path)
        self.assertEqual(len(data), 5808)
        self.assertEqual(data[0], 0)
        self.assertIn(0xFF, data)

    def test_deterministic(self):
        src = Image.new("L", (264, 176), 255)
        for x in range(0, 264, 5):
            src.putpixel((x, x % 176), 0)
        path = self._save(src)
        builder = PushJobBuilder()
        self.assertEqual(builder.build_from_file(path), builder.build_from_file(path))

    def test_invalid_extension(self):
        with self.assertRaises(ValueError):
            PushJobBuilder().build_from_file(os.path.join(self.tmpdir, "badge.tiff"))

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            PushJobBuilder().build_from_file(os.path.join(self.tmpdir, "cat.png"))

    def test_build_from_image_rejects_wrong_size(self):
        with self.assertRaises(ValueError):
            PushJobBuilder().build_from_image(Image.new("1", (10, 10), 255))

    def test_transparent_logo_packs_single_bit(self):
        src = Image.new("RGBA", (264, 176), (0, 0, 0, 0))
        src.putpixel((100, 50), (0, 0, 0, 255))
        path = self._save(src)
        data = PushJobBuilder().build_from_file(path)
        self.assertEqual(len(data), 5808)
        self.assertEqual(sum(bin(byte).count("1") for byte in data), 1)

    def test_thin_source_fits(self):
        path = self._save(Image.new("L", (1, 1000), 0))
        data = PushJobBuilder(DisplayConfig(fit_to_canvas=True)).build_from_file(path)
        self.assertEqual(len(data), 5808)
        self.assertEqual(sum(bin(byte).count("1") for byte in data), 176)

    def test_custom_loader_extensions_accepted(self):
        converter = unittest.mock.Mock()
        converter.load.return_value = Image.new("1", (264, 176), 255)
        loader = ImageLoader({".pbm": converter})
        path = os.path.join(self.tmpdir, "badge.pbm")
        with open(path, "wb") as handle:
            handle.write(b"P4\n")
        builder = PushJobBuilder(loader=loader)

        self.assertEqual(builder.build_from_file(path), bytes(5808))
        converter.load.assert_called_once_with(path, builder.config)

    def test_custom_loader_rejects_default_extensions(self):
        loader = ImageLoader({".pbm": unittest.mock.Mock()})
        path = self._save(Image.new("L", (264, 176), 255))
        with self.assertRaises(ValueError):
            PushJobBuilder(loader=loader).build_from_file(path)
