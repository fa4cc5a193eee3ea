"""Tests for the knowledge base route."""

PATH = "/api/knowledge/base"


def test_article_publishing_and_views(api):
    article = api.create(
        PATH, "create-article", {"articleTitle": "VPN setup", "articleContent": "Steps", "tags": ["it", "vpn"]}
    )
    assert article["status"] == "draft"
    assert article["views"] == 0

    # drafts are not viewable
    assert api.post(PATH, "view-article", {"articleId": article["id"]}).status_code == 400

    api.ok(PATH, "publish-article", {"articleId": article["id"]})
    api.ok(PATH, "view-article", {"articleId": article["id"]})
    viewed = api.ok(PATH, "view-article", {"articleId": article["id"]})
    assert viewed["views"] == 2
    assert len(api.fetch(PATH, "articles", status="published")) == 1


def test_comments_and_metrics(api):
    article = api.create(PATH, "create-article", {"articleTitle": "Expenses"})
    api.create(PATH, "create-category", {"categoryName": "Finance"})
    comment = api.create(PATH, "add-comment", {"articleId": article["id"], "commentText": "Helpful", "rating": 4})
    assert comment["status"] == "pending"
    api.ok(PATH, "moderate-comment", {"commentId": comment["id"]})

    metrics = api.fetch(PATH, "metrics")
    assert metrics["totalArticles"] == 1
    assert metrics["publishedArticles"] == 0
    assert metrics["totalCategories"] == 1
    assert metrics["activeCategories"] == 1
    assert metrics["totalComments"] == 1
    assert metrics["approvedComments"] == 1
    assert metrics["knowledgeScore"] == 88.7
    assert len(api.fetch(PATH, "comments", articleId=article["id"])) == 1


def test_comment_on_unknown_article(api):
    assert api.post(PATH, "add-comment", {"articleId": "x", "commentText": "hi"}).status_code == 404


def test_publish_unknown_article(api):
    response = api.post(PATH, "publish-article", {"articleId": "x"})
    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Article not found"


def test_articles_filtered_by_category(api):
    vpn = api.create(PATH, "create-article", {"articleTitle": "VPN setup", "category": "it"})
    api.create(PATH, "create-article", {"articleTitle": "Expenses", "category": "finance"})
    api.ok(PATH, "publish-article", {"articleId": vpn["id"]})

    assert [a["id"] for a in api.fetch(PATH, "articles", category="it")] == [vpn["id"]]
    assert api.fetch(PATH, "articles", category="finance", status="published") == []
