from autolegal.ingestion.models import EncodedFile, strip_data_url_prefix


class TestStripDataUrlPrefix:
    def test_strips_base64_data_url_header(self) -> None:
        assert strip_data_url_prefix("data:image/jpeg;base64,/9j/4AAQ") == "/9j/4AAQ"

    def test_leaves_plain_base64_unchanged(self) -> None:
        assert strip_data_url_prefix("/9j/4AAQ") == "/9j/4AAQ"

    def test_empty_payload_after_header(self) -> None:
        assert strip_data_url_prefix("data:application/pdf;base64,") == ""


class TestEncodedFileFromDataUrl:
    def test_takes_media_type_from_header(self) -> None:
        f = EncodedFile.from_data_url("poa.jpg", "data:image/jpeg;base64,QUJD")
        assert f.content == "QUJD"
        assert f.media_type == "image/jpeg"
        assert f.name == "poa.jpg"

    def test_explicit_media_type_wins(self) -> None:
        f = EncodedFile.from_data_url(
            "scan", "data:application/octet-stream;base64,QUJD", media_type="application/pdf"
        )
        assert f.media_type == "application/pdf"

    def test_header_without_media_type(self) -> None:
        f = EncodedFile.from_data_url("blob", "data:;base64,QUJD")
        assert f.media_type == ""
        assert f.content == "QUJD"


class TestEncodedFileKinds:
    def test_pdf_detection(self) -> None:
        assert EncodedFile("a.pdf", "", "application/pdf").is_pdf
        assert not EncodedFile("a.jpg", "", "image/jpeg").is_pdf

    def test_image_detection(self) -> None:
        assert EncodedFile("a.png", "", "image/png").is_image
        assert not EncodedFile("a", "", "").is_image
