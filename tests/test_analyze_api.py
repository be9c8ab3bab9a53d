from fastapi.testclient import TestClient

from astro_api.app import app
from astro_api.services import analysis_service
from astro_api.services.llm_client import LLMUnavailableError

client = TestClient(app)


def _fake_llm(monkeypatch, reply="<h3>Report</h3>", error=None):
    calls = []

    async def fake_generate(prompt, max_tokens=3000, temperature=0.7, model=None):
        calls.append({"prompt": prompt, "max_tokens": max_tokens, "temperature": temperature})
        if error is not None:
            raise error
        return reply

    monkeypatch.setenv("GROQ_API_KEY", "test-key")
    monkeypatch.setattr(analysis_service, "generate_completion", fake_generate)
    return calls


def test_facts_without_credential(monkeypatch):
    monkeypatch.delenv("GROQ_API_KEY", raising=False)
    r = client.post("/api/analyze", json={"date": "1990-05-15"})
    assert r.status_code == 200
    j = r.json()
    assert j["zodiac"] == "Taurus"
    assert j["chineseZodiac"] == "Horse"
    assert j["aiAnalysis"] is None
    assert j["pythagoras"]["meta"]["firstNum"] == 30
    assert set(j["pythagoras"]["square"]) == {str(d) for d in range(1, 10)}
    assert j["moon"]["phase"] and j["moon"]["emoji"]
    assert j["input"]["language"] == "uk"
    assert j["input"]["gender"] == "male"
    assert j["warnings"] == []


def test_zodiac_independent_of_language_and_place(monkeypatch):
    monkeypatch.delenv("GROQ_API_KEY", raising=False)
    for extra in ({"language": "en"}, {"language": "fr", "place": "Paris", "time": "23:59"}):
        r = client.post("/api/analyze", json={"date": "1990-05-15", **extra})
        assert r.json()["zodiac"] == "Taurus"


def test_missing_date_never_calls_llm(monkeypatch):
    calls = _fake_llm(monkeypatch)
    for body in ({}, {"date": ""}, {"date": "   ", "language": "en"}):
        r = client.post("/api/analyze", json=body)
        assert r.status_code == 400
        assert r.json() == {"error": "Date is required"}
    assert calls == []


def test_narrative_is_normalized(monkeypatch):
    calls = _fake_llm(monkeypatch, reply='### Title\n**Strong** words {"1": 3}')
    r = client.post("/api/analyze", json={"date": "1990-05-15", "language": "en", "mode": "concise"})
    assert r.status_code == 200
    j = r.json()
    assert j["aiAnalysis"] == "<h3>Title</h3>\n<strong>Strong</strong> words"
    assert j["input"]["mode"] == "concise"
    assert len(calls) == 1
    assert calls[0]["max_tokens"] == 2000
    assert "Language: English." in calls[0]["prompt"]


def test_llm_failure_is_reported_inline(monkeypatch):
    _fake_llm(monkeypatch, error=LLMUnavailableError("Invalid completion API key: 401"))
    r = client.post("/api/analyze", json={"date": "1990-05-15"})
    assert r.status_code == 200
    j = r.json()
    assert j["aiAnalysis"].startswith("AI Error: Invalid completion API key")
    assert j["zodiac"] == "Taurus"


def test_unknown_language_is_echoed_as_fallback(monkeypatch):
    calls = _fake_llm(monkeypatch)
    r = client.post("/api/analyze", json={"date": "1990-05-15", "language": "pl"})
    assert r.json()["input"]["language"] == "ru"
    assert "Language: Russian." in calls[0]["prompt"]


def test_unparseable_date_degrades(monkeypatch):
    monkeypatch.delenv("GROQ_API_KEY", raising=False)
    r = client.post("/api/analyze", json={"date": "15/05/1990"})
    assert r.status_code == 200
    j = r.json()
    assert j["zodiac"] == "Unknown"
    assert j["chineseZodiac"] == "Unknown"
    assert sum(j["pythagoras"]["square"].values()) == 0
    assert j["moon"] == {"phase": "Unknown", "emoji": ""}
    assert len(j["warnings"]) == 4


def test_invalid_gender_is_a_bad_request():
    r = client.post("/api/analyze", json={"date": "1990-05-15", "gender": "robot"})
    assert r.status_code == 400
    assert "gender" in r.json()["error"]


def test_unexpected_error_is_generic(monkeypatch):
    def explode(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.delenv("GROQ_API_KEY", raising=False)
    monkeypatch.setattr(analysis_service, "derive_facts", explode)
    with TestClient(app, raise_server_exceptions=False) as c:
        r = c.post("/api/analyze", json={"date": "1990-05-15"})
    assert r.status_code == 500
    assert r.json() == {"error": "Internal Server Error"}


def test_health():
    assert client.get("/__health").json() == {"ok": True}


def test_root_banner():
    r = client.get("/")
    assert r.status_code == 200
    assert "cosmic-blueprint" in r.json()["message"]


def test_unknown_mode_falls_back_to_detailed(monkeypatch):
    calls = _fake_llm(monkeypatch)
    r = client.post("/api/analyze", json={"date": "1990-05-15", "language": "en", "mode": "verbose"})
    assert r.status_code == 200
    assert r.json()["input"]["mode"] == "detailed"
    assert calls[0]["max_tokens"] == 3000
