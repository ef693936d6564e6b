import pytest

from api import create_app


@pytest.fixture
def client():
    app = create_app()
    app.config["TESTING"] = True
    return app.test_client()


def test_index_and_modes(client):
    assert "endpoints" in client.get("/").get_json()
    modes = client.get("/modes").get_json()["modes"]
    assert [m["id"] for m in modes] == ["codon2aa", "aa2codon"]


def test_codon_table(client):
    body = client.get("/codon-table").get_json()
    assert body["table"]["AUG"]["aa"] == "M"
    assert body["markdown"].startswith("| 1st |")


def test_tools_report(client):
    res = client.post("/tools", json={"sequence": "atg gcc taa", "stop_policy": "trim"})
    assert res.status_code == 200
    report = res.get_json()["report"]
    assert report["protein"] == "MA"
    assert report["rna"] == "AUGGCCUAA"
    assert "image" not in res.get_json()


def test_tools_report_with_image(client):
    res = client.post("/tools", json={"sequence": "GATTACA", "image": True})
    assert res.get_json()["image"].startswith("data:image/png;base64,")


@pytest.mark.parametrize("op, seq, inp, out", [
    ("clean", "acgt xx", "acgt xx", "ACGT"),
    ("revcomp", "ATCG", "ATCG", "CGAT"),
    ("transcribe", "ATCG", "ATCG", "AUCG"),
    ("translate", "ATGGCCTAA", "AUGGCCUAA", "MA*"),
    ("gc", "ACGT", "ACGT", 50),
])
def test_single_tool(client, op, seq, inp, out):
    body = client.post(f"/tools/{op}", json={"sequence": seq}).get_json()
    assert body["type"] == op
    assert body["input"] == inp
    assert body["output"] == out


def test_single_tool_errors(client):
    assert client.post("/tools/fold", json={"sequence": "A"}).status_code == 404
    res = client.post("/tools/translate", json={"sequence": "ATG", "frame": 5})
    assert res.status_code == 400
    assert res.get_json()["success"] is False
    assert client.post("/tools/clean", json={"sequence": 5}).status_code == 400


def test_quiz_is_deterministic(client):
    payload = {"mode": "codon2aa", "count": 10, "seed": 42}
    a = client.post("/quiz", json=payload).get_json()
    b = client.post("/quiz", json=payload).get_json()
    assert a["success"] is True
    assert a["questions"] == b["questions"]
    assert len(a["questions"]) == 10
    assert a["config"]["seed"] == 42
    assert a["validation"]["is_valid"] is True


def test_quiz_defaults(client):
    body = client.post("/quiz", json={}).get_json()
    assert body["config"]["mode"] == "codon2aa"
    assert len(body["questions"]) == 10


@pytest.mark.parametrize("payload", [
    {"count": -1},
    {"count": 1000},
    {"count": "5"},
    {"seed": "abc"},
    {"mode": "rna2dna"},
])
def test_quiz_bad_request(client, payload):
    res = client.post("/quiz", json=payload)
    assert res.status_code == 400
    assert res.get_json()["success"] is False


def test_quiz_score(client):
    quiz = client.post("/quiz", json={"mode": "aa2codon", "count": 3, "seed": 1}).get_json()
    qs = quiz["questions"]
    answers = [
        {"choice": qs[0]["correct"], "elapsed_ms": 1000},
        {"choice": [c for c in qs[1]["choices"] if c != qs[1]["correct"]][0], "elapsed_ms": 3000},
    ]
    res = client.post("/quiz/score", json={"questions": qs, "answers": answers})
    result = res.get_json()["result"]
    assert result["score"] == 1
    assert result["answered"] == 2
    assert result["finished"] is False
    assert result["summary"] == "1/3 • 2.00 s avg"


def test_quiz_score_errors(client):
    quiz = client.post("/quiz", json={"count": 1, "seed": 1}).get_json()
    qs = quiz["questions"]
    too_many = [{"choice": qs[0]["correct"]}] * 2
    assert client.post("/quiz/score", json={"questions": qs, "answers": too_many}).status_code == 400
    bad_choice = [{"choice": "not-a-choice"}]
    assert client.post("/quiz/score", json={"questions": qs, "answers": bad_choice}).status_code == 400


def test_unknown_route_is_json_404(client):
    res = client.get("/nope")
    assert res.status_code == 404
    assert res.get_json()["success"] is False


@pytest.mark.parametrize("path", ["/tools", "/tools/clean", "/quiz", "/quiz/score"])
@pytest.mark.parametrize("body", [[1, 2], ["ACGT"], "ACGT", 7])
def test_non_object_body_is_bad_request(client, path, body):
    res = client.post(path, json=body)
    assert res.status_code == 400
    assert res.get_json()["success"] is False


@pytest.mark.parametrize("payload", [
    {"questions": ["x"]},
    {"questions": "abc"},
    {"questions": [{"prompt": "p", "choices": 3, "correct": "M"}]},
    {"questions": [], "answers": {"choice": "M"}},
])
def test_quiz_score_malformed_questions(client, payload):
    res = client.post("/quiz/score", json=payload)
    assert res.status_code == 400
    assert res.get_json()["success"] is False


@pytest.mark.parametrize("elapsed", [None, "fast", True, [1]])
def test_quiz_score_elapsed_ms(client, elapsed):
    qs = client.post("/quiz", json={"count": 1, "seed": 1}).get_json()["questions"]
    answer = {"choice": qs[0]["correct"], "elapsed_ms": elapsed}
    res = client.post("/quiz/score", json={"questions": qs, "answers": [answer]})
    if elapsed is None:
        # null은 생략한 것과 같다
        assert res.status_code == 200
        assert res.get_json()["result"]["score"] == 1
    else:
        assert res.status_code == 400
