import unittest
import os
import yaml
from unittest.mock import patch, mock_open
from pydantic import ValidationError
from spacefit.config_loader import (
    load_config, AppConfig, ComponentWeights, ResultPolicy, ScorerConfig
)


class TestConfigLoader(unittest.TestCase):

    def setUp(self):
        self.sample_config = {
            "matching": {
                "scorer": {
                    "bfi_weights": {"location": 0.4, "size": 0.2, "budget": 0.2, "property_type": 0.2},
                    "pfi_location_neutral": 55
                },
                "result_policy": {"min_score": 35, "top_k": 20, "relaxation_thresholds": [70, 55, 35]},
                "explainability": {"max_reasons": 3}
            }
        }
        self.config_yaml = yaml.dump(self.sample_config)

    def test_load_config_default(self):
        with patch("builtins.open", mock_open(read_data=self.config_yaml)):
            with patch("os.path.exists", return_value=True):
                config = load_config("dummy_path.yaml")
                self.assertIsInstance(config, AppConfig)
                self.assertEqual(config.matching.scorer.bfi_weights.location, 0.4)
                self.assertEqual(config.matching.scorer.pfi_location_neutral, 55)
                self.assertEqual(config.matching.result_policy.relaxation_thresholds, [70, 55, 35])
                self.assertEqual(config.matching.explainability.max_reasons, 3)

    def test_omitted_sections_use_defaults(self):
        with patch("builtins.open", mock_open(read_data=self.config_yaml)):
            with patch("os.path.exists", return_value=True):
                config = load_config("dummy_path.yaml")
                self.assertEqual(config.matching.scorer.pfi_weights.size, 0.30)
                self.assertTrue(config.matching.matcher.skip_unavailable)
                self.assertEqual(config.matching.explainability.currency_symbol, "₹")

    def test_empty_file(self):
        with patch("builtins.open", mock_open(read_data="")):
            with patch("os.path.exists", return_value=True):
                config = load_config("empty.yaml")
                self.assertEqual(config.matching.result_policy.top_k, 50)
                self.assertEqual(config.matching.result_policy.min_score, 30)

    def test_env_var_override_result_policy(self):
        with patch("builtins.open", mock_open(read_data=self.config_yaml)):
            with patch("os.path.exists", return_value=True):
                with patch.dict(os.environ, {"SPACEFIT_TOP_K": "5", "SPACEFIT_MIN_SCORE": "30"}):
                    config = load_config("dummy_path.yaml")
                    self.assertEqual(config.matching.result_policy.top_k, 5)
                    self.assertEqual(config.matching.result_policy.min_score, 30)

    def test_env_var_override_currency(self):
        with patch("builtins.open", mock_open(read_data="")):
            with patch("os.path.exists", return_value=True):
                with patch.dict(os.environ, {"SPACEFIT_CURRENCY_SYMBOL": "$"}):
                    config = load_config("dummy_path.yaml")
                    self.assertEqual(config.matching.explainability.currency_symbol, "$")

    def test_repo_config_file(self):
        # Falls back to the repo-level config.yaml
        config = load_config("does-not-exist.yaml")
        self.assertEqual(config.matching.scorer.bfi_weights.location, 0.30)
        self.assertEqual(config.matching.result_policy.relaxation_thresholds, [60, 50, 40, 30])


class TestConfigValidation(unittest.TestCase):

    def test_weights_must_sum_to_one(self):
        with self.assertRaises(ValidationError):
            ComponentWeights(location=0.5, size=0.5, budget=0.5, property_type=0.0)

    def test_weights_out_of_range(self):
        with self.assertRaises(ValidationError):
            ComponentWeights(location=1.5, size=-0.5, budget=0.0, property_type=0.0)

    def test_default_weights(self):
        config = ScorerConfig()
        self.assertEqual(config.bfi_weights.location, 0.30)
        self.assertEqual(config.pfi_weights.budget, 0.30)
        self.assertEqual(config.fault_score, 20)

    def test_thresholds_must_descend(self):
        with self.assertRaises(ValidationError):
            ResultPolicy(relaxation_thresholds=[40, 50, 60])
        with self.assertRaises(ValidationError):
            ResultPolicy(relaxation_thresholds=[])
        with self.assertRaises(ValidationError):
            ResultPolicy(relaxation_thresholds=[120, 60])

    def test_top_k_positive(self):
        with self.assertRaises(ValidationError):
            ResultPolicy(top_k=0)


if __name__ == '__main__':
    unittest.main()
