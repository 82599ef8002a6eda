from xlsxparts.mediafile import MediaFile


def test_construct_from_bytes():
    media = MediaFile(b"abc", "png", "image/png")
    assert media.contents == b"abc"
    assert media.suffix == "png"
    assert media.mime_type == "image/png"
    assert media.index == 0
    assert media.index_valid is False
    assert len(media.hash_key()) == 16


def test_construct_from_file_name_has_no_hash():
    media = MediaFile(file_name="xl/media/image1.png")
    assert media.file_name == "xl/media/image1.png"
    assert media.hash_key() == b""
    assert media.contents == b""


def test_equal_contents_give_equal_hash():
    assert MediaFile(b"data", "png").hash_key() == MediaFile(b"data", "jpg").hash_key()
    assert MediaFile(b"data").hash_key() != MediaFile(b"other").hash_key()


def test_set_index_then_set_resets_validity():
    media = MediaFile(b"one", "png", "image/png")
    media.set_index(3)
    assert media.index == 3
    assert media.index_valid is True
    media.set(b"two", "gif", "image/gif")
    assert media.index_valid is False
    assert media.contents == b"two"
    assert media.suffix == "gif"
    assert media.mime_type == "image/gif"
    assert media.hash_key() == MediaFile(b"two").hash_key()


def test_set_on_file_name_media_computes_hash():
    media = MediaFile(file_name="xl/media/image2.bmp")
    media.set(b"bits", "bmp")
    assert media.hash_key() == MediaFile(b"bits").hash_key()
    assert media.mime_type == ""