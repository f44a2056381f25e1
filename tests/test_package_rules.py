import pytest

from gfp_doctor.outcome import Outcome
from gfp_doctor.rules import ExamineOptions
from gfp_doctor.rules import package_json as rules
from gfp_doctor.rules.package_json import PACKAGE_JSON_RULES

OPTIONS = ExamineOptions()

ABSENT_MEANS_PASS = {
    rules.not_using_stash_angular_module_no_deps,
    rules.should_use_public_require_polyfill,
}


@pytest.mark.parametrize("rule", PACKAGE_JSON_RULES.rules, ids=lambda rule: rule.id)
def test_empty_manifest_is_not_applicable_except_permissive_rules(rule):
    outcome = rule.predicate({}, OPTIONS)

    if rule.predicate in ABSENT_MEANS_PASS:
        assert outcome is Outcome.PASSED
    else:
        assert outcome is Outcome.NOT_APPLICABLE


@pytest.mark.parametrize("rule", PACKAGE_JSON_RULES.rules, ids=lambda rule: rule.id)
def test_predicates_tolerate_malformed_sections(rule):
    document = {"devDependencies": ["karma"], "scripts": "lint"}

    assert rule.predicate(document, OPTIONS) in (Outcome.PASSED, Outcome.NOT_APPLICABLE)


def test_registry_has_fourteen_rules_in_order():
    ids = [rule.id for rule in PACKAGE_JSON_RULES]

    assert PACKAGE_JSON_RULES.name == "package.json"
    assert len(ids) == 14
    assert ids[0] == "public-eslint-config"
    assert ids[-1] == "karma-jasmine-1.1"


def test_stash_eslint_config_fails():
    document = {"devDependencies": {"gfp-eslint-config": "git+ssh://stash/gfp-eslint-config.git"}}

    assert rules.not_using_stash_gfp_eslint_config(document, OPTIONS) is Outcome.FAILED
    assert rules.not_using_stash_gfp_eslint_config({"devDependencies": {}}, OPTIONS) is Outcome.PASSED


def test_eslint_config_gfp_presence():
    document = {"devDependencies": {"eslint-config-gfp": "^3.0.0"}}

    assert rules.using_eslint_config_gfp(document, OPTIONS) is Outcome.PASSED
    assert rules.using_eslint_config_gfp({"devDependencies": {}}, OPTIONS) is Outcome.NOT_APPLICABLE


def test_angular_module_no_deps_from_stash_fails():
    stash = {"devDependencies": {"angular-module-no-deps": "git+ssh://git@stash.mrgreen.zone/fe/amnd.git"}}
    public = {"devDependencies": {"angular-module-no-deps": "^1.2.0"}}

    assert rules.not_using_stash_angular_module_no_deps(stash, OPTIONS) is Outcome.FAILED
    assert rules.not_using_stash_angular_module_no_deps(public, OPTIONS) is Outcome.PASSED


def test_angular_module_no_deps_non_text_version_passes():
    document = {"devDependencies": {"angular-module-no-deps": {"version": "stash.mrgreen.zone"}}}

    assert rules.not_using_stash_angular_module_no_deps(document, OPTIONS) is Outcome.PASSED


def test_documentation_and_lint_script():
    document = {"devDependencies": {"documentation": "^4.0.0"}, "scripts": {"lint": "eslint *.js"}}

    assert rules.using_documentation_js(document, OPTIONS) is Outcome.PASSED
    assert rules.has_npm_lint_script(document, OPTIONS) is Outcome.PASSED
    assert rules.has_npm_lint_script({"scripts": {"lint": ""}}, OPTIONS) is Outcome.NOT_APPLICABLE


def test_phantomjs_is_explicit_failure():
    assert rules.should_use_phantomjs_prebuilt({"devDependencies": {"phantomjs": "1.0.0"}}, OPTIONS) is Outcome.FAILED


def test_phantomjs_wins_over_prebuilt():
    document = {"devDependencies": {"phantomjs": "1.0.0", "phantomjs-prebuilt": "^2.1.0"}}

    assert rules.should_use_phantomjs_prebuilt(document, OPTIONS) is Outcome.FAILED


def test_phantomjs_prebuilt_passes():
    document = {"devDependencies": {"phantomjs-prebuilt": "^2.1.0"}}

    assert rules.should_use_phantomjs_prebuilt(document, OPTIONS) is Outcome.PASSED


@pytest.mark.parametrize(
    "declared, expected",
    [("^1.0.0", Outcome.PASSED), (">=0.2.0", Outcome.PASSED), ("^0.2.3", Outcome.FAILED)],
)
def test_phantomjs_launcher_range(declared, expected):
    document = {"devDependencies": {"karma-phantomjs-launcher": declared}}

    assert rules.should_use_phantomjs_launcher_1(document, OPTIONS) is expected


def test_prepush_requires_husky_and_script():
    both = {"devDependencies": {"husky": "^0.14.0"}, "scripts": {"prepush": "npm run lint"}}
    husky_only = {"devDependencies": {"husky": "^0.14.0"}}
    script_only = {"scripts": {"prepush": "npm run lint"}}

    assert rules.should_use_prepush_hooks(both, OPTIONS) is Outcome.PASSED
    assert rules.should_use_prepush_hooks(husky_only, OPTIONS) is Outcome.NOT_APPLICABLE
    assert rules.should_use_prepush_hooks(script_only, OPTIONS) is Outcome.NOT_APPLICABLE


def test_require_polyfill_over_ssh_fails():
    ssh = {"devDependencies": {"require-polyfill": "git+ssh://git@stash.mrgreen.zone/fe/rp.git"}}
    public = {"devDependencies": {"require-polyfill": "^1.0.0"}}

    assert rules.should_use_public_require_polyfill(ssh, OPTIONS) is Outcome.FAILED
    assert rules.should_use_public_require_polyfill(public, OPTIONS) is Outcome.PASSED


@pytest.mark.parametrize(
    "declared, expected",
    [("^3.0.0", Outcome.PASSED), ("^2.0.0", Outcome.FAILED), ("~3.1.0", Outcome.PASSED)],
)
def test_eslint_config_gfp_floor(declared, expected):
    document = {"devDependencies": {"eslint-config-gfp": declared}}

    assert rules.should_use_eslint_config_gfp_300(document, OPTIONS) is expected


def test_unparseable_range_fails_floor_check():
    document = {"devDependencies": {"karma": "git+ssh://git@example.com/karma.git"}}

    assert rules.should_use_karma_170(document, OPTIONS) is Outcome.FAILED


def test_postinstall_invokes_doctor():
    document = {"scripts": {"postinstall": "npm run build && gfp-doctor"}}

    assert rules.should_run_gfp_doctor_post_install(document, OPTIONS) is Outcome.PASSED
    assert (
        rules.should_run_gfp_doctor_post_install({"scripts": {"postinstall": "npm run build"}}, OPTIONS)
        is Outcome.NOT_APPLICABLE
    )


@pytest.mark.parametrize(
    "predicate, name, good, bad",
    [
        (rules.should_use_karma_170, "karma", "^1.7.0", "^1.6.0"),
        (rules.should_use_karma_coverage_110, "karma-coverage", "^1.1.0", "^1.0.0"),
        (rules.should_use_karma_jasmine_110, "karma-jasmine", "^1.1.0", "~1.0.2"),
    ],
)
def test_karma_version_floors(predicate, name, good, bad):
    assert predicate({"devDependencies": {name: good}}, OPTIONS) is Outcome.PASSED
    assert predicate({"devDependencies": {name: bad}}, OPTIONS) is Outcome.FAILED
