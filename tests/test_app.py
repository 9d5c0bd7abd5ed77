"""Flask front end: HTML form and JSON endpoint."""


def test_get_renders_form(client):
    resp = client.get("/")
    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert 'name="gender" value="male" checked' in html
    assert 'id="age"' in html and 'id="height"' in html and 'id="weight"' in html
    assert "Allowed: 1–120 years" in html
    assert 'class="error-message"' not in html


def test_post_male_shows_formatted_result(client):
    resp = client.post("/", data={"gender": "male", "age": "30", "height": "175", "weight": "70"})
    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert '<span id="bmrResult">1,696</span>' in html


def test_post_female(client):
    resp = client.post("/", data={"gender": "female", "age": "30", "height": "165", "weight": "60"})
    assert '<span id="bmrResult">1,384</span>' in resp.get_data(as_text=True)


def test_post_without_gender_defaults_to_male(client):
    resp = client.post("/", data={"age": "30", "height": "175", "weight": "70"})
    assert "1,696" in resp.get_data(as_text=True)


def test_post_invalid_shows_error_and_keeps_values(client):
    resp = client.post("/", data={"gender": "female", "age": "", "height": "175", "weight": "70"})
    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert '<div class="error-message">please enter a valid age (1–120)</div>' in html
    assert 'value="175"' in html
    assert 'value="female" checked' in html
    assert '<span id="bmrResult"></span>' in html


def test_post_reports_height_before_weight(client):
    resp = client.post("/", data={"gender": "male", "age": "40", "height": "20", "weight": "500"})
    assert "please enter a valid height (50–250 cm)" in resp.get_data(as_text=True)


class TestApi:
    def test_json_success(self, client):
        resp = client.post("/api/bmr", json={"gender": "male", "age": 30, "height": 175, "weight": 70})
        assert resp.status_code == 200
        assert resp.get_json() == {"ok": True, "bmr": 1696}

    def test_json_invalid(self, client):
        resp = client.post("/api/bmr", json={"gender": "female", "age": 30, "height": 165, "weight": 10})
        assert resp.status_code == 400
        assert resp.get_json() == {"ok": False, "message": "please enter a valid weight (20–300 kg)"}

    def test_form_data_accepted(self, client):
        resp = client.post("/api/bmr", data={"gender": "female", "age": "30", "height": "165", "weight": "60"})
        assert resp.get_json() == {"ok": True, "bmr": 1384}

    def test_huge_number_is_a_validation_error(self, client):
        resp = client.post("/api/bmr", json={"gender": "male", "age": 30, "height": 10 ** 400, "weight": 70})
        assert resp.status_code == 400
        assert resp.get_json() == {"ok": False, "message": "please enter a valid height (50–250 cm)"}

    def test_non_object_body_fails_on_age(self, client):
        resp = client.post("/api/bmr", json=[1, 2, 3])
        assert resp.status_code == 400
        assert resp.get_json()["message"] == "please enter a valid age (1–120)"

    def test_get_not_allowed(self, client):
        assert client.get("/api/bmr").status_code == 405
