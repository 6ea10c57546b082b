#!/usr/bin/env python3
"""
Transforms Demo: run every transform on its sample document.

Usage:
    python demo_transforms.py [config.yaml]

Shows, for each sample:
1. The transform that reads it
2. The result (XML, text, integer or id list)
"""

import sys

from xmltransforms import transforms
from xmltransforms.config import DEFAULT_CONFIG, load_config
from xmltransforms.examples import sample_documents
from xmltransforms.logging_utils import get_logger, setup_logger


TAKES_CONFIG = {
    "create_hierarchy",
    "read_customers_from_csv",
    "replace_customers_with_contacts",
    "sort_customers",
    "get_orders_value",
}


def main():
    setup_logger(level="DEBUG")
    config = load_config(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_CONFIG
    logger = get_logger("demo")
    logger.info("Running %d transform(s), indent=%d", len(sample_documents()), config.indent)

    print("=" * 80)
    print("XML TRANSFORMS DEMO")
    print("=" * 80)

    for step, (name, document) in enumerate(sample_documents().items(), start=1):
        transform = getattr(transforms, name)
        print(f"\n{step}. {name.upper()}")
        print("-" * 80)
        if name in TAKES_CONFIG:
            result = transform(document, config=config)
        else:
            result = transform(document)
        print(result)

    print("\n" + "=" * 80)
    print("FLAT FORM OF THE CONCATENATION SAMPLE:")
    print(transforms.get_flatten_string(sample_documents()["get_concatenation_string"]))
    print("=" * 80)


if __name__ == "__main__":
    main()
