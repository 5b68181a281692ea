from prime_sum.driver import main

raise SystemExit(main())
