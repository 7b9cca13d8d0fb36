from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["manage"])

MANAGE_PAGE = """<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>Team Management</title>
    <style>
        body { font-family: sans-serif; max-width: 800px; margin: 0 auto; padding: 20px; }
        .card { border: 1px solid #ddd; padding: 15px; margin-bottom: 20px; border-radius: 4px; }
        h2 { margin-top: 0; }
        input, button, select { padding: 8px; margin: 5px 0; }
        table { width: 100%; border-collapse: collapse; }
        th, td { text-align: left; padding: 8px; border-bottom: 1px solid #ddd; }
        .success { color: green; }
        .error { color: red; }
    </style>
</head>
<body>
    <h1>Team Management &amp; Invites</h1>

    <div class="card">
        <h2>Add Team</h2>
        <input type="text" id="newName" placeholder="Team name">
        <input type="text" id="newToken" placeholder="Token" style="width: 300px;">
        <input type="text" id="newAccountId" placeholder="Account ID" style="width: 300px;">
        <button onclick="addTeam()">Add Team</button>
    </div>

    <div class="card">
        <h2>Teams</h2>
        <table id="teamsTable">
            <thead><tr><th>Name</th><th>Token</th><th>Account ID</th><th></th></tr></thead>
            <tbody></tbody>
        </table>
    </div>

    <div class="card">
        <h2>Send Invites</h2>
        <label for="inviteTeamSelect"><strong>Team:</strong></label>
        <select id="inviteTeamSelect"></select>
        <br><br>
        <textarea id="inviteEmails" rows="5" style="width: 100%;"
                  placeholder="One email per line, or comma separated"></textarea>
        <button id="sendButton" onclick="sendInvites()">Send Invites</button>
        <div id="inviteResult"></div>
    </div>

    <script>
        function cell(text) {
            const td = document.createElement('td');
            td.textContent = text;
            return td;
        }

        async function loadTeams() {
            const res = await fetch('/api/teams');
            const teams = await res.json();

            const tbody = document.querySelector('#teamsTable tbody');
            tbody.innerHTML = '';
            teams.forEach((t) => {
                const tr = document.createElement('tr');
                tr.appendChild(cell(t.name));
                tr.appendChild(cell(t.token.substring(0, 10) + '...'));
                tr.appendChild(cell(t.accountId));
                const action = document.createElement('td');
                const btn = document.createElement('button');
                btn.textContent = 'Delete';
                btn.onclick = () => deleteTeam(t.id);
                action.appendChild(btn);
                tr.appendChild(action);
                tbody.appendChild(tr);
            });

            const select = document.getElementById('inviteTeamSelect');
            const previous = select.value;
            select.innerHTML = '';
            if (teams.length === 0) {
                const option = document.createElement('option');
                option.value = '';
                option.text = 'No teams available';
                select.add(option);
                return;
            }
            teams.forEach((t) => {
                const option = document.createElement('option');
                option.value = t.id;
                option.text = t.name;
                select.add(option);
            });
            if (previous) select.value = previous;
        }

        async function addTeam() {
            const name = document.getElementById('newName').value;
            const token = document.getElementById('newToken').value;
            const accountId = document.getElementById('newAccountId').value;
            if (!token || !accountId) return alert('Token and Account ID required');

            await fetch('/api/teams', {
                method: 'POST',
                headers: {'Content-Type': 'application/json'},
                body: JSON.stringify({ name, token, accountId })
            });
            ['newName', 'newToken', 'newAccountId'].forEach((id) => {
                document.getElementById(id).value = '';
            });
            loadTeams();
        }

        async function deleteTeam(id) {
            if (!confirm('Delete this team?')) return;
            await fetch('/api/teams/' + encodeURIComponent(id), { method: 'DELETE' });
            loadTeams();
        }

        async function sendInvites() {
            const text = document.getElementById('inviteEmails').value;
            const emails = text.split(/[\\n,]/).map(e => e.trim()).filter(e => e);
            const teamId = document.getElementById('inviteTeamSelect').value;
            if (emails.length === 0) return alert('No emails entered');

            const btn = document.getElementById('sendButton');
            const out = document.getElementById('inviteResult');
            btn.disabled = true;
            btn.innerText = 'Sending...';
            try {
                const res = await fetch('/api/invite', {
                    method: 'POST',
                    headers: {'Content-Type': 'application/json'},
                    body: JSON.stringify({ emails, teamId: teamId || undefined })
                });
                const data = await res.json();
                const p = document.createElement('p');
                if (data.success) {
                    p.className = 'success';
                    p.textContent = 'Invites sent using ' + data.team + '.';
                } else {
                    p.className = 'error';
                    const detail = data.error || (data.details && data.details.error) || 'Unknown error';
                    p.textContent = 'Failed: ' + detail;
                }
                out.replaceChildren(p);
            } catch (e) {
                out.innerHTML = '<p class="error">Error sending invites</p>';
            }
            btn.disabled = false;
            btn.innerText = 'Send Invites';
        }

        loadTeams();
    </script>
</body>
</html>
"""


@router.get("/manage", response_class=HTMLResponse)
async def manage_page():
    return HTMLResponse(MANAGE_PAGE)
