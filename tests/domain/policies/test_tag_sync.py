# tests/domain/policies/test_tag_sync.py
from __future__ import annotations

from storefront.domain.policies.tag_sync import plan_tag_sync


def test_three_way_diff():
    # join rows 10/11/12 link tags 1/2/3
    current = [(10, 1), (11, 2), (12, 3)]
    plan = plan_tag_sync(current, [2, 3, 4])

    assert plan.to_add == [4]
    assert plan.to_remove == [10]
    assert plan.keep == [2, 3]
    assert not plan.is_noop


def test_same_set_is_noop():
    current = [(10, 1), (11, 2)]
    plan = plan_tag_sync(current, [2, 1])
    assert plan.is_noop
    assert plan.keep == [2, 1]


def test_no_current_links_adds_everything_once():
    plan = plan_tag_sync([], [5, 6, 5, 7])
    assert plan.to_add == [5, 6, 7]
    assert plan.to_remove == []


def test_disjoint_sets_replace_all():
    plan = plan_tag_sync([(1, 1), (2, 2)], [3])
    assert plan.to_add == [3]
    assert plan.to_remove == [1, 2]
    assert plan.keep == []


def test_duplicate_links_for_kept_tag_are_left_alone():
    # two rows for tag 2 already exist; neither is touched
    plan = plan_tag_sync([(1, 2), (2, 2), (3, 9)], [2])
    assert plan.to_add == []
    assert plan.to_remove == [3]


def test_applying_result_again_is_idempotent():
    first = plan_tag_sync([(10, 1), (11, 2), (12, 3)], [2, 3, 4])
    after = [(11, 2), (12, 3), (13, 4)]
    assert plan_tag_sync(after, [2, 3, 4]).is_noop
    assert first.to_add == [4]
