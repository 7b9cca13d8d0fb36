from team_invites.api.main import main

main()
