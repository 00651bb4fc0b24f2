import pytest

from lims_core.tests.helpers import make_result

pytestmark = pytest.mark.django_db


def test_display_values(jane):
    pending = make_result(jane, "S-500", result_type="rtlamp")
    assert pending.result_type_display == "RT-LAMP"
    assert pending.result_display == "Pending"

    legacy = make_result(jane, "S-501", result_type="culture", result="positive")
    assert legacy.result_type_display == "N/A"
    assert legacy.result_display == "positive"
