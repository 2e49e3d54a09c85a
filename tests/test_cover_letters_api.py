"""
API tests for the cover letter endpoints under /api/resumes/{id}
"""
from smartresume.core.exceptions import AIProviderError


def create_resume(client, headers, payload):
    response = client.post("/api/resumes", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["id"]


def test_latest_is_null_before_generation(client, auth_headers, resume_payload):
    resume_id = create_resume(client, auth_headers, resume_payload)

    response = client.get(f"/api/resumes/{resume_id}/cover-letter", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() is None


def test_generate_with_explicit_tone_and_job(client, auth_headers, resume_payload, fake_llm):
    resume_id = create_resume(client, auth_headers, resume_payload)
    fake_llm.responses.append("Dear Hiring Manager,\n\nI would love to join.")

    response = client.post(
        f"/api/resumes/{resume_id}/cover-letter",
        json={"tone": "confident", "jobDescription": "Staff engineer, Rust"},
        headers=auth_headers,
    )

    assert response.status_code == 201
    letter = response.json()
    assert letter["resumeId"] == resume_id
    assert letter["tone"] == "confident"
    assert letter["jobDescription"] == "Staff engineer, Rust"
    assert letter["content"].startswith("Dear Hiring Manager")
    assert "Staff engineer, Rust" in fake_llm.calls[0]["prompt"]

    latest = client.get(f"/api/resumes/{resume_id}/cover-letter", headers=auth_headers).json()
    assert latest["id"] == letter["id"]


def test_generate_falls_back_to_stored_job_description(
    client, auth_headers, resume_payload, fake_llm, optimization_reply
):
    fake_llm.responses.append(optimization_reply())
    resume_id = create_resume(client, auth_headers, dict(resume_payload, jobDescription="Platform engineer, Go"))
    fake_llm.responses.append("Letter body")

    letter = client.post(f"/api/resumes/{resume_id}/cover-letter", json={}, headers=auth_headers).json()

    assert letter["tone"] == "professional"
    assert letter["jobDescription"] == "Platform engineer, Go"
    assert "Platform engineer, Go" in fake_llm.calls[-1]["prompt"]


def test_unknown_tone_is_400(client, auth_headers, resume_payload):
    resume_id = create_resume(client, auth_headers, resume_payload)
    response = client.post(f"/api/resumes/{resume_id}/cover-letter", json={"tone": "sarcastic"}, headers=auth_headers)
    assert response.status_code == 400


def test_generation_failure_is_502(client, auth_headers, resume_payload, fake_llm):
    resume_id = create_resume(client, auth_headers, resume_payload)
    fake_llm.error = AIProviderError("quota exceeded")

    response = client.post(f"/api/resumes/{resume_id}/cover-letter", json={}, headers=auth_headers)

    assert response.status_code == 502
    assert response.json() == {"detail": "Failed to generate cover letter"}
    assert client.get(f"/api/resumes/{resume_id}/cover-letter", headers=auth_headers).json() is None


def test_history_and_edit(client, auth_headers, resume_payload, fake_llm):
    resume_id = create_resume(client, auth_headers, resume_payload)
    fake_llm.responses.extend(["One two three", "Four five"])
    client.post(f"/api/resumes/{resume_id}/cover-letter", json={}, headers=auth_headers)
    client.post(f"/api/resumes/{resume_id}/cover-letter", json={}, headers=auth_headers)

    history = client.get(
        f"/api/resumes/{resume_id}/cover-letters", params={"per_page": 10}, headers=auth_headers
    ).json()

    assert history["meta"] == {"page": 1, "perPage": 10, "total": 2, "totalPages": 1}
    assert sorted(item["wordCount"] for item in history["items"]) == [2, 3]
    assert all(item["content"] is None for item in history["items"])

    letter_id = history["items"][0]["id"]
    edited = client.put(
        f"/api/resumes/{resume_id}/cover-letters/{letter_id}",
        json={"content": "Edited by hand"},
        headers=auth_headers,
    )
    assert edited.status_code == 200
    assert edited.json()["content"] == "Edited by hand"


def test_edit_rejects_letter_from_another_resume(client, auth_headers, resume_payload, fake_llm):
    first = create_resume(client, auth_headers, resume_payload)
    second = create_resume(client, auth_headers, resume_payload)
    fake_llm.responses.append("Letter for first")
    letter_id = client.post(f"/api/resumes/{first}/cover-letter", json={}, headers=auth_headers).json()["id"]

    response = client.put(
        f"/api/resumes/{second}/cover-letters/{letter_id}", json={"content": "Moved"}, headers=auth_headers
    )

    assert response.status_code == 404
    assert response.json() == {"detail": "Cover letter not found"}


def test_edit_requires_content(client, auth_headers, resume_payload, fake_llm):
    resume_id = create_resume(client, auth_headers, resume_payload)
    fake_llm.responses.append("Letter")
    letter_id = client.post(f"/api/resumes/{resume_id}/cover-letter", json={}, headers=auth_headers).json()["id"]

    response = client.put(
        f"/api/resumes/{resume_id}/cover-letters/{letter_id}", json={"content": ""}, headers=auth_headers
    )
    assert response.status_code == 400
