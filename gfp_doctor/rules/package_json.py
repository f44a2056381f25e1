"""Best-practice checks for a project's package.json."""

from __future__ import annotations

from typing import Any, Mapping

from gfp_doctor.outcome import Outcome
from gfp_doctor.utils import contains_text, dig, less_than_range, satisfies

from . import ExamineOptions, Rule, RuleSet

MANIFEST_NAME = "package.json"

STASH_ESLINT_CONFIG = "gfp-eslint-config"
PUBLIC_ESLINT_CONFIG = "eslint-config-gfp"
ANGULAR_MODULE_NO_DEPS = "angular-module-no-deps"
STASH_HOST = "stash.mrgreen.zone"
DOCUMENTATION_JS = "documentation"
PHANTOMJS = "phantomjs"
PHANTOMJS_PREBUILT = "phantomjs-prebuilt"
PHANTOMJS_LAUNCHER = "karma-phantomjs-launcher"
HUSKY = "husky"
REQUIRE_POLYFILL = "require-polyfill"
SSH_SCHEME = "ssh://"
DOCTOR_COMMAND = "gfp-doctor"

# Highest version that must fall below each declared range.
VERSION_FLOORS = {
    PUBLIC_ESLINT_CONFIG: "2.9.9",
    "karma": "1.6.9",
    "karma-coverage": "1.0.9",
    "karma-jasmine": "1.0.9",
}


def _dev_dependency(document: Mapping[str, Any], name: str) -> Any:
    return dig(document, "devDependencies", name)


def _floor_check(document: Mapping[str, Any], name: str) -> Outcome:
    declared = _dev_dependency(document, name)
    if declared is None:
        return Outcome.NOT_APPLICABLE
    return Outcome.coerce(less_than_range(VERSION_FLOORS[name], declared))


def not_using_stash_gfp_eslint_config(document: Mapping[str, Any], options: ExamineOptions) -> Outcome:
    if dig(document, "devDependencies") is None:
        return Outcome.NOT_APPLICABLE
    if _dev_dependency(document, STASH_ESLINT_CONFIG) is not None:
        return Outcome.FAILED
    return Outcome.PASSED


def using_eslint_config_gfp(document: Mapping[str, Any], options: ExamineOptions) -> Outcome:
    if _dev_dependency(document, PUBLIC_ESLINT_CONFIG) is None:
        return Outcome.NOT_APPLICABLE
    return Outcome.PASSED


def not_using_stash_angular_module_no_deps(document: Mapping[str, Any], options: ExamineOptions) -> Outcome:
    declared = _dev_dependency(document, ANGULAR_MODULE_NO_DEPS)
    if declared is None:
        return Outcome.PASSED
    if contains_text(declared, STASH_HOST):
        return Outcome.FAILED
    return Outcome.PASSED


def using_documentation_js(document: Mapping[str, Any], options: ExamineOptions) -> Outcome:
    if _dev_dependency(document, DOCUMENTATION_JS) is None:
        return Outcome.NOT_APPLICABLE
    return Outcome.PASSED


def has_npm_lint_script(document: Mapping[str, Any], options: ExamineOptions) -> Outcome:
    if dig(document, "scripts", "lint") is None:
        return Outcome.NOT_APPLICABLE
    return Outcome.PASSED


def should_use_phantomjs_prebuilt(document: Mapping[str, Any], options: ExamineOptions) -> Outcome:
    if _dev_dependency(document, PHANTOMJS) is not None:
        return Outcome.FAILED
    if _dev_dependency(document, PHANTOMJS_PREBUILT) is not None:
        return Outcome.PASSED
    return Outcome.NOT_APPLICABLE


def should_use_phantomjs_launcher_1(document: Mapping[str, Any], options: ExamineOptions) -> Outcome:
    declared = _dev_dependency(document, PHANTOMJS_LAUNCHER)
    if declared is None:
        return Outcome.NOT_APPLICABLE
    return Outcome.coerce(satisfies("1.0.0", declared))


def should_use_prepush_hooks(document: Mapping[str, Any], options: ExamineOptions) -> Outcome:
    if _dev_dependency(document, HUSKY) is None:
        return Outcome.NOT_APPLICABLE
    if dig(document, "scripts", "prepush") is None:
        return Outcome.NOT_APPLICABLE
    return Outcome.PASSED


def should_use_public_require_polyfill(document: Mapping[str, Any], options: ExamineOptions) -> Outcome:
    # Passes when devDependencies is missing altogether.
    declared = _dev_dependency(document, REQUIRE_POLYFILL)
    if declared is not None and contains_text(declared, SSH_SCHEME):
        return Outcome.FAILED
    return Outcome.PASSED


def should_use_eslint_config_gfp_300(document: Mapping[str, Any], options: ExamineOptions) -> Outcome:
    return _floor_check(document, PUBLIC_ESLINT_CONFIG)


def should_run_gfp_doctor_post_install(document: Mapping[str, Any], options: ExamineOptions) -> Outcome:
    if contains_text(dig(document, "scripts", "postinstall"), DOCTOR_COMMAND):
        return Outcome.PASSED
    return Outcome.NOT_APPLICABLE


def should_use_karma_170(document: Mapping[str, Any], options: ExamineOptions) -> Outcome:
    return _floor_check(document, "karma")


def should_use_karma_coverage_110(document: Mapping[str, Any], options: ExamineOptions) -> Outcome:
    return _floor_check(document, "karma-coverage")


def should_use_karma_jasmine_110(document: Mapping[str, Any], options: ExamineOptions) -> Outcome:
    return _floor_check(document, "karma-jasmine")


PACKAGE_JSON_RULES = RuleSet(
    name=MANIFEST_NAME,
    rules=(
        Rule(
            id="public-eslint-config",
            description="using public npm version of gfp eslint config",
            error_message=(
                'remove "gfp-eslint-config" from package.json and run '
                '"npm install --save-dev eslint eslint-config-gfp"'
            ),
            predicate=not_using_stash_gfp_eslint_config,
        ),
        Rule(
            id="eslint-config-gfp",
            description="using eslint-config-gfp",
            error_message='run "npm install --save-dev eslint-config-gfp"',
            predicate=using_eslint_config_gfp,
        ),
        Rule(
            id="public-angular-module-no-deps",
            description="using public npm version of angular-module-no-deps",
            error_message=(
                'remove "angular-module-no-deps" from package.json and run '
                '"npm install --save-dev angular-module-no-deps"'
            ),
            predicate=not_using_stash_angular_module_no_deps,
        ),
        Rule(
            id="documentationjs",
            description="using documentationjs",
            error_message=(
                'should be using documentationjs to generate JSDoc to README: '
                '"npm install --save-dev documentation" \n'
                "then add scripts: \n"
                '"docs": "npm run docs:md",\n'
                "\"docs:md\": \"documentation readme <source files>.js --section 'API'\""
            ),
            predicate=using_documentation_js,
        ),
        Rule(
            id="lint-script",
            description="has npm script lint",
            error_message=(
                "should have a npm script lint\n"
                "then add script: \n"
                '"lint": "eslint *.js"'
            ),
            predicate=has_npm_lint_script,
        ),
        Rule(
            id="phantomjs-prebuilt",
            description="should be using phantomjs-prebuilt",
            error_message=(
                "remove phantomjs from package.json, then run \n"
                "npm install --save-dev phantomjs-prebuilt"
            ),
            predicate=should_use_phantomjs_prebuilt,
        ),
        Rule(
            id="karma-phantomjs-launcher-1",
            description='should use "karma-phantomjs-launcher" 1 and up',
            error_message='set "karma-phantomjs-launcher" to use "^1.0.0"',
            predicate=should_use_phantomjs_launcher_1,
        ),
        Rule(
            id="prepush-hooks",
            description="should use prepush hooks",
            error_message=(
                "run:\n"
                "npm install --save-dev husky\n"
                "then add the following to npm scripts:\n"
                '"prepush": "npm run lint && karma start --single-run"'
            ),
            predicate=should_use_prepush_hooks,
        ),
        Rule(
            id="public-require-polyfill",
            description="should use public require-polyfill",
            error_message=(
                "remove require-polyfill from package.json, then run \n"
                "npm install --save-dev require-polyfill\n"
            ),
            predicate=should_use_public_require_polyfill,
        ),
        Rule(
            id="eslint-config-gfp-3",
            description="should use eslint-config-gfp 3.0.0 and up",
            error_message='set eslint-config-gfp to use version "^3.0.0" in package.json',
            predicate=should_use_eslint_config_gfp_300,
        ),
        Rule(
            id="postinstall-gfp-doctor",
            description="should run gfp-doctor after install",
            error_message=(
                "add the following to npm scripts:\n"
                '"postinstall": "gfp-doctor"'
            ),
            predicate=should_run_gfp_doctor_post_install,
        ),
        Rule(
            id="karma-1.7",
            description='should use "karma" 1.7.0 and up',
            error_message='set "karma" to use "^1.7.0"',
            predicate=should_use_karma_170,
        ),
        Rule(
            id="karma-coverage-1.1",
            description='should use "karma-coverage" 1.1.0 and up',
            error_message='set "karma-coverage" to use "^1.1.0"',
            predicate=should_use_karma_coverage_110,
        ),
        Rule(
            id="karma-jasmine-1.1",
            description='should use "karma-jasmine" 1.1.0 and up',
            error_message='set "karma-jasmine" to use "^1.1.0"',
            predicate=should_use_karma_jasmine_110,
        ),
    ),
)