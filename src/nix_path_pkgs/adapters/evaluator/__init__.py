"""Evaluator adapters implementing EvaluatorPort."""

from nix_path_pkgs.adapters.evaluator.nix import NixEvaluator


__all__ = ["NixEvaluator"]
