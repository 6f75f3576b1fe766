from api_tester.normalizer import RawResponse, normalize_response, parse_body


class TestNormalizeResponse:
    def test_json_body_is_parsed(self) -> None:
        record = normalize_response(
            RawResponse(
                status=200,
                status_text="OK",
                headers={"content-type": "application/json"},
                text='{"ok":true}',
            )
        )

        assert record.status == 200
        assert record.status_text == "OK"
        assert record.headers == {"content-type": "application/json"}
        assert record.body == {"ok": True}

    def test_non_json_body_stays_text(self) -> None:
        record = normalize_response(
            RawResponse(status=500, status_text="Internal Server Error", text="not json")
        )

        assert record.status == 500
        assert record.body == "not json"

    def test_json_is_tried_regardless_of_content_type(self) -> None:
        record = normalize_response(
            RawResponse(
                status=200,
                status_text="OK",
                headers={"content-type": "text/plain"},
                text="[1, 2, 3]",
            )
        )

        assert record.body == [1, 2, 3]

    def test_empty_body(self) -> None:
        assert parse_body("") == ""

    def test_scalar_json(self) -> None:
        assert parse_body("42") == 42
        assert parse_body('"quoted"') == "quoted"
