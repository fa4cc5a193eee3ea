"""Tests for the sustainability route."""

PATH = "/api/sustainability"


def test_metrics(api):
    """Test the reduction rate, offsets and the capped score."""
    api.create(PATH, "record-waste", {"wasteType": "recyclable", "quantity": 30, "disposalMethod": "recycling"})
    api.create(PATH, "record-waste", {"wasteType": "general", "quantity": 70, "disposalMethod": "landfill"})
    initiative = api.create(PATH, "create-initiative", {"initiativeName": "LED lighting", "category": "energy"})
    api.create(PATH, "record-offset", {"offsetType": "tree-planting", "quantity": 40, "cost": 200})

    assert api.ok(PATH, "start-initiative", {"initiativeId": initiative["id"]})["status"] == "in-progress"
    done = api.ok(PATH, "complete-initiative", {"initiativeId": initiative["id"], "actualSavings": 1200})
    assert done["status"] == "completed"
    assert done["endDate"] is not None
    assert done["actualSavings"] == 1200

    assert api.fetch(PATH, "metrics") == {
        "totalWaste": 100,
        "recycledWaste": 30,
        "wasteReductionRate": 30,
        "greenInitiativesCompleted": 1,
        "totalCarbonOffset": 40,
        "estimatedCarbonReduction": 20,
        "sustainabilityScore": 40,
    }


def test_score_is_capped(api):
    api.create(PATH, "record-waste", {"wasteType": "recyclable", "quantity": 10, "disposalMethod": "recycling"})
    initiative = api.create(PATH, "create-initiative", {"initiativeName": "Solar"})
    api.ok(PATH, "complete-initiative", {"initiativeId": initiative["id"]})
    assert api.fetch(PATH, "metrics")["sustainabilityScore"] == 100
    assert api.post(PATH, "complete-initiative", {"initiativeId": initiative["id"]}).status_code == 400


def test_waste_filter_and_validation(api):
    api.create(PATH, "record-waste", {"wasteType": "organic", "quantity": 5, "disposalMethod": "composting"})
    assert len(api.fetch(PATH, "waste", wasteType="organic")) == 1
    assert api.fetch(PATH, "waste", wasteType="hazardous") == []
    response = api.post(PATH, "record-waste", {"wasteType": "organic", "quantity": 0, "disposalMethod": "composting"})
    assert response.status_code == 400
