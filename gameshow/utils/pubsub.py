import base64
import json


def build_topic_path(project_id, topic_name):
    return 'projects/{}/topics/{}'.format(project_id, topic_name)


def event_to_message_action(event):
    data = base64.b64decode(event['data']).decode('utf-8')
    return event['attributes']['action_name'], json.loads(data)


class Triggerer:

    def __init__(self, publisher, project_id, topic_name):
        self.publisher = publisher
        self.topic_path = build_topic_path(project_id, topic_name)

    def trigger_handle_message_action(self, action_name, message_action):
        data = json.dumps(message_action).encode('utf-8')
        return self.publisher.publish(
            self.topic_path, data=data, action_name=action_name)
