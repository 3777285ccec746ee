import os
import json

jsons_dir_path = os.path.join(
    os.path.dirname(os.path.dirname(__file__)), 'jsons')


def get_json(*path_parts):
    with open(os.path.join(jsons_dir_path, *path_parts)) as f:
        return json.load(f)
