"""
Projects API tests — listing, type filter, featured, single project.
"""


def test_list_projects_seeded(client):
    response = client.get("/api/projects")
    assert response.status_code == 200
    titles = [p["title"] for p in response.json()]
    assert titles == ["Modern Villa in Patna", "Tech Park Office Complex", "Modern School Campus"]


def test_projects_use_camel_case(client):
    project = client.get("/api/projects").json()[0]
    assert project["projectType"] == "residential"
    assert project["completedDate"] == "Jan 2023"
    assert project["imageUrl"].startswith("https://")
    assert "project_type" not in project


def test_filter_projects_by_type(client):
    response = client.get("/api/projects", params={"type": "commercial"})
    assert [p["title"] for p in response.json()] == ["Tech Park Office Complex"]

    response = client.get("/api/projects", params={"type": "industrial"})
    assert response.json() == []


def test_featured_projects(client):
    response = client.get("/api/projects/featured")
    assert response.status_code == 200
    assert len(response.json()) == 3
    assert all(p["featured"] for p in response.json())


def test_get_project_by_id(client):
    response = client.get("/api/projects/2")
    assert response.status_code == 200
    assert response.json()["id"] == 2
    assert response.json()["title"] == "Tech Park Office Complex"


def test_get_project_not_found(client):
    response = client.get("/api/projects/99")
    assert response.status_code == 404
    assert response.json() == {"message": "Project not found"}


def test_get_project_invalid_id(client):
    response = client.get("/api/projects/abc")
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid project ID"}


def test_health(client):
    assert client.get("/health").json() == {"status": "ok", "app": "omav-construction"}
