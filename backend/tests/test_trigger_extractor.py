import unittest

from domain.models import InputKind, NumericBounds
from domain.trigger import BOOLEAN_OPTIONS, ENVIRONMENT_OPTIONS, extract_trigger_schema


_DEPLOY_WORKFLOW = """\
name: Deploy

on:
  push:
    branches: [main]
  workflow_dispatch:
    inputs:
      environment:
        description: 'target env'
        required: true
        type: choice
        options: [prod, staging]
      dry_run:
        description: "Skip the publish step"
        type: boolean
        default: false
        options: [yes, no]
      replicas:
        type: number
        minimum: 1
        maximum: 10
      notes:
        description: Free text  # shown in the run summary

jobs:
  deploy:
    runs-on: ubuntu-latest
    steps:
      - run: echo "inputs: ${{ inputs.environment }}"
"""


class TriggerPresenceTests(unittest.TestCase):
    def test_workflow_without_manual_trigger_has_no_schema(self) -> None:
        workflow_text = "name: CI\non:\n  push:\n    branches: [main]\njobs:\n  build:\n    runs-on: ubuntu-latest\n"
        self.assertIsNone(extract_trigger_schema(workflow_text))

    def test_workflow_dispatch_mentioned_outside_trigger_section_is_ignored(self) -> None:
        workflow_text = (
            "on: push\n"
            "jobs:\n"
            "  build:\n"
            "    steps:\n"
            "      - run: echo workflow_dispatch\n"
        )
        self.assertIsNone(extract_trigger_schema(workflow_text))

    def test_manual_trigger_without_inputs_is_empty_schema(self) -> None:
        workflow_text = "on:\n  workflow_dispatch:\njobs:\n  build:\n    runs-on: ubuntu-latest\n"
        self.assertEqual(extract_trigger_schema(workflow_text), {})

    def test_empty_inputs_block_is_also_empty_schema(self) -> None:
        workflow_text = "on:\n  workflow_dispatch:\n    inputs:\n  push:\n    branches: [main]\n"
        self.assertEqual(extract_trigger_schema(workflow_text), {})

    def test_bare_scalar_trigger(self) -> None:
        self.assertEqual(extract_trigger_schema("on: workflow_dispatch\n"), {})

    def test_flow_list_trigger(self) -> None:
        self.assertEqual(extract_trigger_schema("on: [push, workflow_dispatch]\n"), {})

    def test_block_list_trigger(self) -> None:
        self.assertEqual(extract_trigger_schema("on:\n- push\n- workflow_dispatch\n"), {})
        self.assertEqual(extract_trigger_schema("on:\n  - push\n  - workflow_dispatch\n"), {})

    def test_nested_list_item_is_not_a_trigger(self) -> None:
        workflow_text = "on:\n  push:\n    branches:\n      - workflow_dispatch\n"
        self.assertIsNone(extract_trigger_schema(workflow_text))

    def test_nested_key_named_like_trigger_is_ignored(self) -> None:
        workflow_text = "on:\n  push:\n    workflow_dispatch:\n      inputs:\n        tag:\n          required: true\n"
        self.assertIsNone(extract_trigger_schema(workflow_text))

    def test_inputs_below_another_trigger_field_are_ignored(self) -> None:
        workflow_text = (
            "on:\n"
            "  workflow_dispatch:\n"
            "    extra:\n"
            "      inputs:\n"
            "        target:\n"
            "          required: true\n"
        )
        self.assertEqual(extract_trigger_schema(workflow_text), {})

    def test_inputs_after_sibling_field_are_read(self) -> None:
        workflow_text = (
            "on:\n"
            "  workflow_dispatch:\n"
            "    extra:\n"
            "      inputs:\n"
            "        ignored:\n"
            "          required: true\n"
            "    inputs:\n"
            "      target:\n"
            "        required: true\n"
        )
        self.assertEqual(list(extract_trigger_schema(workflow_text)), ["target"])

    def test_quoted_on_key(self) -> None:
        workflow_text = '"on":\n  workflow_dispatch:\n    inputs:\n      tag:\n        required: true\n'
        schema = extract_trigger_schema(workflow_text)
        self.assertEqual(list(schema), ["tag"])
        self.assertTrue(schema["tag"].required)

    def test_unreadable_text_degrades_to_no_schema(self) -> None:
        self.assertIsNone(extract_trigger_schema(None))  # type: ignore[arg-type]


class InputFieldTests(unittest.TestCase):
    def test_choice_input_from_bracketed_options(self) -> None:
        workflow_text = (
            "on:\n  workflow_dispatch:\n    inputs:\n      environment:\n"
            "        description: 'target env'\n        required: true\n"
            "        type: choice\n        options: [prod, staging]"
        )
        schema = extract_trigger_schema(workflow_text)

        self.assertEqual(list(schema), ["environment"])
        environment = schema["environment"]
        self.assertEqual(environment.kind, InputKind.CHOICE)
        self.assertTrue(environment.required)
        self.assertEqual(environment.options, ("prod", "staging"))
        self.assertEqual(environment.description, "target env")

    def test_inputs_keep_declaration_order(self) -> None:
        schema = extract_trigger_schema(_DEPLOY_WORKFLOW)
        self.assertEqual(list(schema), ["environment", "dry_run", "replicas", "notes"])

    def test_boolean_options_are_fixed(self) -> None:
        dry_run = extract_trigger_schema(_DEPLOY_WORKFLOW)["dry_run"]
        self.assertEqual(dry_run.kind, InputKind.BOOLEAN)
        self.assertEqual(dry_run.options, BOOLEAN_OPTIONS)
        self.assertEqual(dry_run.default, "false")
        self.assertFalse(dry_run.required)
        self.assertEqual(dry_run.description, "Skip the publish step")

    def test_number_bounds_default_step(self) -> None:
        replicas = extract_trigger_schema(_DEPLOY_WORKFLOW)["replicas"]
        self.assertEqual(replicas.kind, InputKind.NUMBER)
        self.assertEqual(replicas.bounds, NumericBounds(minimum=1, maximum=10, step=1))
        self.assertIsNone(replicas.options)

    def test_missing_type_defaults_to_string_and_comment_is_stripped(self) -> None:
        notes = extract_trigger_schema(_DEPLOY_WORKFLOW)["notes"]
        self.assertEqual(notes.kind, InputKind.STRING)
        self.assertEqual(notes.description, "Free text")
        self.assertEqual(notes.label, "Free text")

    def test_unknown_type_falls_back_to_string(self) -> None:
        workflow_text = "on:\n  workflow_dispatch:\n    inputs:\n      version:\n        type: Semver\n"
        version = extract_trigger_schema(workflow_text)["version"]
        self.assertEqual(version.kind, InputKind.STRING)
        self.assertEqual(version.label, "version")

    def test_required_is_case_insensitive(self) -> None:
        workflow_text = (
            "on:\n  workflow_dispatch:\n    inputs:\n"
            "      first:\n        required: TRUE\n"
            "      second:\n        required: 'True'\n"
            "      third:\n        required: false\n"
        )
        schema = extract_trigger_schema(workflow_text)
        self.assertTrue(schema["first"].required)
        self.assertTrue(schema["second"].required)
        self.assertFalse(schema["third"].required)

    def test_choice_without_options_uses_default(self) -> None:
        workflow_text = (
            "on:\n  workflow_dispatch:\n    inputs:\n      region:\n"
            "        type: choice\n        default: \"eu-west-1\"\n"
        )
        region = extract_trigger_schema(workflow_text)["region"]
        self.assertEqual(region.options, ("eu-west-1",))
        self.assertEqual(region.default, "eu-west-1")

    def test_choice_with_block_list_options(self) -> None:
        workflow_text = (
            "on:\n  workflow_dispatch:\n    inputs:\n      level:\n"
            "        type: choice\n        options:\n          - low\n          - 'high'\n"
        )
        self.assertEqual(extract_trigger_schema(workflow_text)["level"].options, ("low", "high"))

    def test_environment_options_prepend_unknown_default(self) -> None:
        workflow_text = (
            "on:\n  workflow_dispatch:\n    inputs:\n"
            "      target:\n        type: environment\n        default: qa\n"
            "      stage:\n        type: environment\n        default: staging\n"
        )
        schema = extract_trigger_schema(workflow_text)
        self.assertEqual(schema["target"].options, ("qa", *ENVIRONMENT_OPTIONS))
        self.assertEqual(schema["stage"].options, ENVIRONMENT_OPTIONS)

    def test_folded_description(self) -> None:
        workflow_text = (
            "on:\n  workflow_dispatch:\n    inputs:\n      reason:\n"
            "        description: >\n          Why this run\n          was started\n"
            "        required: true\n"
        )
        reason = extract_trigger_schema(workflow_text)["reason"]
        self.assertEqual(reason.description, "Why this run was started")
        self.assertTrue(reason.required)

    def test_inline_empty_input_declaration(self) -> None:
        workflow_text = "on:\n  workflow_dispatch:\n    inputs:\n      ticket: {}\n      owner:\n        default: ops\n"
        schema = extract_trigger_schema(workflow_text)
        self.assertEqual(list(schema), ["ticket", "owner"])
        self.assertEqual(schema["owner"].default, "ops")

    def test_each_extraction_builds_a_fresh_schema(self) -> None:
        first_schema = extract_trigger_schema(_DEPLOY_WORKFLOW)
        first_schema.pop("environment")
        self.assertIn("environment", extract_trigger_schema(_DEPLOY_WORKFLOW))


if __name__ == "__main__":
    unittest.main()
