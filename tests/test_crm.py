"""Tests for the CRM customers route."""

PATH = "/api/crm/customers"


def create_customer(api, **overrides):
    body = {"name": "Globex", "email": "buyer@globex.test", "city": "Springfield"}
    body.update(overrides)
    return api.create(PATH, "create-customer", body)


def test_create_and_fetch_customer(api):
    """Test that a created customer is retrievable by id."""
    customer = create_customer(api)
    assert customer["status"] == "active"
    assert customer["type"] == "individual"
    assert customer["totalPurchases"] == 0

    fetched = api.fetch(PATH, "customer", customerId=customer["id"])
    assert fetched["name"] == "Globex"


def test_update_customer_only_changes_given_fields(api):
    customer = create_customer(api)
    updated = api.ok(PATH, "update-customer", {"customerId": customer["id"], "totalPurchases": 1200})
    assert updated["totalPurchases"] == 1200
    assert updated["city"] == "Springfield"


def test_update_unknown_customer(api):
    response = api.post(PATH, "update-customer", {"customerId": "missing", "name": "X"})
    assert response.status_code == 404


def test_delete_customer(api):
    customer = create_customer(api)
    api.ok(PATH, "delete-customer", {"customerId": customer["id"]})
    assert api.fetch(PATH, "customers") == []
    assert api.get(PATH, "customer", customerId=customer["id"]).status_code == 404


def test_record_interaction(api):
    customer = create_customer(api)
    interaction = api.create(
        PATH,
        "record-interaction",
        {"customerId": customer["id"], "type": "call", "subject": "Renewal", "duration": 15},
    )
    assert interaction["duration"] == 15
    assert len(api.fetch(PATH, "interactions", customerId=customer["id"])) == 1


def test_interaction_for_unknown_customer(api):
    response = api.post(PATH, "record-interaction", {"customerId": "nope", "type": "email", "subject": "Hi"})
    assert response.status_code == 404


def test_lead_lifecycle_and_conversion(api):
    """Test lead status updates and conversion into a business customer."""
    lead = api.create(PATH, "create-lead", {"name": "Initech", "email": "hello@initech.test", "value": 5000})
    assert lead["status"] == "new"
    assert lead["probability"] == 0

    qualified = api.ok(PATH, "update-lead-status", {"leadId": lead["id"], "status": "qualified", "probability": 60})
    assert qualified["probability"] == 60

    customer = api.create(PATH, "convert-lead", {"leadId": lead["id"]})
    assert customer["type"] == "business"
    assert customer["name"] == "Initech"
    assert api.fetch(PATH, "leads", status="converted")[0]["id"] == lead["id"]


def test_convert_unknown_lead(api):
    assert api.post(PATH, "convert-lead", {"leadId": "missing"}).status_code == 404


def test_metrics(api):
    first = create_customer(api)
    create_customer(api, name="Other", email="o@o.test")
    api.ok(PATH, "update-customer", {"customerId": first["id"], "totalPurchases": 300, "status": "inactive"})
    api.create(PATH, "record-interaction", {"customerId": first["id"], "type": "note", "subject": "x"})
    lead = api.create(PATH, "create-lead", {"name": "L", "email": "l@l.test"})
    api.create(PATH, "create-lead", {"name": "M", "email": "m@m.test"})
    api.create(PATH, "convert-lead", {"leadId": lead["id"]})

    metrics = api.fetch(PATH, "metrics")
    assert metrics["totalCustomers"] == 3
    assert metrics["activeCustomers"] == 2
    assert metrics["totalLeads"] == 2
    assert metrics["convertedLeads"] == 1
    assert metrics["conversionRate"] == 50
    assert metrics["totalInteractions"] == 1
    assert metrics["averageCustomerValue"] == 100
