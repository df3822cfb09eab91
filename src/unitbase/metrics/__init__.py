from unitbase.metrics.classifier import CLASSIFICATION_RULES, classify, explain

__all__ = ["CLASSIFICATION_RULES", "classify", "explain"]
