from typedraft import JsonCorpus, load_config, run_pipeline, write_outputs
import sys

def main():
    directory = "data/response-body-config-appinit/web"
    if len(sys.argv) > 1:
        directory = sys.argv[1]

    print(f"Loading {directory}...")
    corpus = JsonCorpus(directory)

    # Inspect inferred fields before writing anything
    corpus.print_schema()

    config = load_config(sys.argv[2] if len(sys.argv) > 2 else None)
    result = run_pipeline(corpus, config)
    write_outputs(result, config)
    print(f"Generated {len(result.draft.field_definitions)} field definitions.")


if __name__ == '__main__':
    main()
